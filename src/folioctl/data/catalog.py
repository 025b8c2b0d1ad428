"""Catalog — read-only access to domains, technologies, and projects.

The catalog is the single fact base handed to the query engine, resolver,
and projector. It is built once and never mutated.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from folioctl.domain.models import Domain, Period, Project, Technology
from folioctl.domain.periods import format_period
from folioctl.domain.tags import all_technologies


class Catalog:
    """In-memory portfolio dataset with the lookup helpers pages depend on.

    Attributes:
        domains: Domains in canonical dataset order.
        technologies: Technology id to display metadata.
        projects: Deep-dive projects in dataset order.
        repo_base: Repository URL used to build commit links.
    """

    def __init__(
        self,
        domains: Iterable[Domain],
        technologies: Mapping[str, Technology],
        projects: Iterable[Project] = (),
        *,
        repo_base: str = "",
    ) -> None:
        self.domains: tuple[Domain, ...] = tuple(domains)
        self.technologies: Mapping[str, Technology] = MappingProxyType(dict(technologies))
        self.projects: tuple[Project, ...] = tuple(projects)
        self.repo_base = repo_base.rstrip("/")

        self._by_id: dict[str, Domain] = {}
        for domain in self.domains:
            if domain.id in self._by_id:
                msg = f"Duplicate domain id: {domain.id}"
                raise ValueError(msg)
            self._by_id[domain.id] = domain

    @classmethod
    def from_records(
        cls,
        domains: Iterable[Mapping[str, Any]],
        technologies: Mapping[str, Mapping[str, Any]],
        projects: Iterable[Mapping[str, Any]] = (),
        *,
        repo_base: str = "",
    ) -> Catalog:
        """Validate plain records into a catalog."""
        return cls(
            [Domain.model_validate(d) for d in domains],
            {k: Technology.model_validate(v) for k, v in technologies.items()},
            [Project.model_validate(p) for p in projects],
            repo_base=repo_base,
        )

    # ------------------------------------------------------------------
    # lookups
    # ------------------------------------------------------------------

    def get_domain(self, domain_id: str) -> Domain | None:
        return self._by_id.get(domain_id)

    def get_projects_for_domain(self, domain_id: str) -> list[Project]:
        return [p for p in self.projects if domain_id in p.domains]

    def domains_by_technology(self, tech_id: str) -> list[Domain]:
        return [d for d in self.domains if tech_id in d.technology_set]

    def all_technologies(self) -> list[str]:
        return all_technologies(self.domains)

    # ------------------------------------------------------------------
    # display helpers
    # ------------------------------------------------------------------

    def commit_url(self, commit_hash: str) -> str:
        return f"{self.repo_base}/commit/{commit_hash}"

    @staticmethod
    def format_period(period: Period) -> str:
        return format_period(period)

    # ------------------------------------------------------------------
    # canonical orderings
    # ------------------------------------------------------------------

    def sort_by_commits(self) -> list[Domain]:
        from folioctl.services.query import sort_by_commits

        return sort_by_commits(self.domains)

    def sort_by_recency(self) -> list[Domain]:
        from folioctl.services.query import sort_by_recency

        return sort_by_recency(self.domains)

    def sort_alphabetically(self) -> list[Domain]:
        from folioctl.services.query import sort_alphabetically

        return sort_alphabetically(self.domains)


@functools.cache
def _bundled_records() -> tuple[tuple[Domain, ...], dict[str, Technology], tuple[Project, ...]]:
    from folioctl.data import portfolio

    return (
        tuple(Domain.model_validate(d) for d in portfolio.DOMAINS),
        {k: Technology.model_validate(v) for k, v in portfolio.TECHNOLOGIES.items()},
        tuple(Project.model_validate(p) for p in portfolio.PROJECTS),
    )


def load_catalog(repo_base: str | None = None) -> Catalog:
    """Build the bundled portfolio catalog.

    Records are validated once per process; *repo_base* overrides the
    bundled repository URL for commit links.
    """
    from folioctl.data.portfolio import REPO_BASE

    domains, technologies, projects = _bundled_records()
    return Catalog(domains, technologies, projects, repo_base=repo_base or REPO_BASE)
