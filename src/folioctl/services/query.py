"""Query engine and QueryService — listing, lookup, and related domains.

The engine is a set of pure functions applied in a fixed order:

1. sort by the selected key (stable; dataset order breaks ties)
2. keep domains carrying *every* selected technology
3. keep domains matching the free-text search

The input sequence is never mutated; every call returns a new list.
:class:`QueryService` wraps the engine for the CLI and returns
ServiceResult payloads.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from folioctl.domain.models import Domain, Technology
from folioctl.domain.periods import format_period, recency_key
from folioctl.domain.state import QueryState
from folioctl.domain.tags import common_technologies, resolve_technology, technology_color
from folioctl.domain.types import SortKey
from folioctl.services.base import BaseService
from folioctl.services.related import related_to
from folioctl.services.result import ServiceError, ServiceResult
from folioctl.services.urlstate import (
    deserialize,
    extract_query,
    record_id_from_path,
    serialize,
)

# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


def sort_by_commits(domains: Iterable[Domain]) -> list[Domain]:
    """Most commits first."""
    return sorted(domains, key=lambda d: d.commit_count, reverse=True)


def sort_by_recency(domains: Iterable[Domain]) -> list[Domain]:
    """Latest end first (``present`` leads), then latest start."""
    return sorted(domains, key=lambda d: recency_key(d.period), reverse=True)


def sort_alphabetically(domains: Iterable[Domain]) -> list[Domain]:
    """Case-insensitive ordinal order by name."""
    return sorted(domains, key=lambda d: d.name.lower())


_SORTERS: dict[SortKey, Callable[[Iterable[Domain]], list[Domain]]] = {
    SortKey.COMMITS: sort_by_commits,
    SortKey.RECENT: sort_by_recency,
    SortKey.ALPHA: sort_alphabetically,
}


def sort_domains(domains: Iterable[Domain], sort_key: SortKey) -> list[Domain]:
    return _SORTERS.get(sort_key, sort_by_commits)(domains)


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def filter_by_technologies(domains: Iterable[Domain], techs: Iterable[str]) -> list[Domain]:
    """Keep domains whose technologies include every id in *techs*."""
    required = set(techs)
    if not required:
        return list(domains)
    return [d for d in domains if required <= d.technology_set]


def matches_search(
    domain: Domain,
    needle: str,
    technologies: Mapping[str, Technology],
) -> bool:
    """True if lower-cased *needle* occurs in any searchable field of *domain*.

    Searched: name, short name, description, technology ids and their
    display names, and highlights.
    """
    if needle in domain.name.lower():
        return True
    if needle in domain.short_name.lower():
        return True
    if needle in domain.description.lower():
        return True
    for tech in domain.technologies:
        if needle in tech.lower():
            return True
        if needle in resolve_technology(tech, technologies).name.lower():
            return True
    return any(needle in h.lower() for h in domain.highlights)


def search_domains(
    domains: Iterable[Domain],
    search_query: str,
    technologies: Mapping[str, Technology],
) -> list[Domain]:
    """Keep domains matching *search_query*; blank queries keep everything."""
    needle = search_query.strip().lower()
    if not needle:
        return list(domains)
    return [d for d in domains if matches_search(d, needle, technologies)]


def query(
    domains: Iterable[Domain],
    state: QueryState,
    *,
    technologies: Mapping[str, Technology] | None = None,
) -> list[Domain]:
    """Run the full sort → tag filter → search pipeline for *state*."""
    results = sort_domains(domains, state.sort_key)
    results = filter_by_technologies(results, state.selected_techs)
    return search_domains(results, state.search_query, technologies or {})


# ---------------------------------------------------------------------------
# QueryService
# ---------------------------------------------------------------------------


class QueryService(BaseService):
    """Catalog queries for the CLI."""

    def list_domains(
        self,
        *,
        techs: Iterable[str] = (),
        sort: str | None = None,
        search: str | None = None,
        url: str | None = None,
    ) -> ServiceResult:
        """Filtered, sorted listing.

        When *url* is given its query string seeds the state; explicit
        flags are applied on top of it.
        """
        catalog = self._catalog
        if url is not None:
            state = deserialize(extract_query(url), catalog.all_technologies())
        else:
            state = QueryState()
        state.selected_techs.update(t for t in techs if t)
        if sort is not None:
            state.sort_key = SortKey.parse(sort)
        if search is not None:
            state.search_query = search

        results = query(catalog.domains, state, technologies=catalog.technologies)
        return ServiceResult(
            ok=True,
            op="list_domains",
            data={
                "state": state.to_dict(),
                "query": serialize(state),
                "count": len(results),
                "items": [self._summary(d) for d in results],
            },
        )

    def get_domain(self, ref: str) -> ServiceResult:
        """Full record for a domain id or detail-page path."""
        catalog = self._catalog
        domain_id = record_id_from_path(ref)
        domain = catalog.get_domain(domain_id)
        if domain is None:
            return self._not_found("get_domain", domain_id)

        detail = self._settings.detail
        data = self._summary(domain)
        data.update(
            {
                "color": domain.color,
                "description": domain.description,
                "highlights": list(domain.highlights),
                "commits": [
                    {
                        "hash": c.hash[: detail.short_hash_length],
                        "url": catalog.commit_url(c.hash),
                        "message": c.message,
                        "date": c.date,
                    }
                    for c in domain.key_commits
                ],
                "related": [
                    {"id": r.domain.id, "name": r.domain.short_name, "overlap": r.overlap}
                    for r in related_to(domain, catalog.domains, limit=detail.related_limit)
                ],
                "projects": [
                    {"id": p.id, "name": p.name}
                    for p in catalog.get_projects_for_domain(domain.id)
                ],
            }
        )
        return ServiceResult(ok=True, op="get_domain", data=data)

    def related(self, domain_id: str, *, limit: int | None = None) -> ServiceResult:
        """Domains ranked by shared technologies with *domain_id*."""
        catalog = self._catalog
        domain = catalog.get_domain(domain_id)
        if domain is None:
            return self._not_found("related_domains", domain_id)

        if limit is None:
            limit = self._settings.detail.related_limit
        ranked = related_to(domain, catalog.domains, limit=limit)
        return ServiceResult(
            ok=True,
            op="related_domains",
            data={
                "id": domain.id,
                "count": len(ranked),
                "items": [
                    {
                        "id": r.domain.id,
                        "name": r.domain.name,
                        "overlap": r.overlap,
                        "shared": sorted(domain.technology_set & r.domain.technology_set),
                    }
                    for r in ranked
                ],
            },
        )

    def list_technologies(self) -> ServiceResult:
        """Every technology in use, with usage counts and filter eligibility."""
        catalog = self._catalog
        listing = self._settings.listing
        filterable = set(
            common_technologies(
                catalog.domains,
                min_domains=listing.filter_min_domains,
                limit=listing.filter_max_tags,
            )
        )
        items = []
        for tech_id in catalog.all_technologies():
            tech = resolve_technology(tech_id, catalog.technologies)
            items.append(
                {
                    "id": tech_id,
                    "name": tech.name,
                    "color": technology_color(tech),
                    "domains": len(catalog.domains_by_technology(tech_id)),
                    "filter": tech_id in filterable,
                }
            )
        return ServiceResult(
            ok=True, op="list_technologies", data={"count": len(items), "items": items}
        )

    def encode_state(
        self,
        *,
        techs: Iterable[str] = (),
        sort: str | None = None,
        search: str | None = None,
    ) -> ServiceResult:
        """Query string for the given listing state."""
        state = QueryState.build(techs=techs, sort=sort, search=search)
        page = self._settings.site.listing_page
        query_string = serialize(state)
        return ServiceResult(
            ok=True,
            op="encode_state",
            data={
                "query": query_string,
                "url": f"{page}?{query_string}" if query_string else page,
                "state": state.to_dict(),
            },
        )

    def decode_state(self, query_string: str) -> ServiceResult:
        """Listing state for a query string, with unknown tags dropped."""
        state = deserialize(
            extract_query(query_string),
            self._catalog.all_technologies(),
        )
        return ServiceResult(
            ok=True,
            op="decode_state",
            data={"state": state.to_dict(), "query": serialize(state)},
        )

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _summary(self, domain: Domain) -> dict[str, Any]:
        technologies = self._catalog.technologies
        return {
            "id": domain.id,
            "name": domain.name,
            "short_name": domain.short_name,
            "commit_count": domain.commit_count,
            "period": format_period(domain.period),
            "technologies": [resolve_technology(t, technologies).name for t in domain.technologies],
        }

    @staticmethod
    def _not_found(op: str, domain_id: str) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="NOT_FOUND",
                message=f"No domain with id '{domain_id}'",
                detail={"id": domain_id},
            ),
        )
