"""Detail controller — one domain page keyed by the address path."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from folioctl.rendering.views import DomainDetail, ProjectionContext, project_detail
from folioctl.services.related import related_to
from folioctl.services.urlstate import record_id_from_path

if TYPE_CHECKING:
    from folioctl.data.catalog import Catalog
    from folioctl.domain.models import Project

logger = logging.getLogger(__name__)

RenderSink = Callable[[DomainDetail], object]


class DetailController:
    """Look up a domain by path, resolve its neighbours, and render it.

    Args:
        catalog: The read-only dataset.
        render: Called with the projected :class:`DomainDetail`.
        ctx: Projection lookups and display limits.
        related_limit: How many related domains to show.
        get_projects: Project association lookup. Defaults to the
            catalog's own.
    """

    def __init__(
        self,
        catalog: Catalog,
        *,
        render: RenderSink,
        ctx: ProjectionContext | None = None,
        related_limit: int = 3,
        get_projects: Callable[[str], Sequence[Project]] | None = None,
    ) -> None:
        self._catalog = catalog
        self._render = render
        self._ctx = ctx or ProjectionContext(
            technologies=catalog.technologies,
            format_period=catalog.format_period,
            commit_url=catalog.commit_url,
        )
        self._related_limit = related_limit
        self._get_projects = get_projects or catalog.get_projects_for_domain

    def load(self, path: str) -> DomainDetail | None:
        """Render the domain named by *path*.

        An unknown id is logged and leaves the page unrendered; it never
        raises.
        """
        domain_id = record_id_from_path(path)
        domain = self._catalog.get_domain(domain_id)
        if domain is None:
            logger.warning("Domain not found: %s", domain_id)
            return None

        related = related_to(domain, self._catalog.domains, limit=self._related_limit)
        projects = self._get_projects(domain.id)
        detail = project_detail(domain, related, projects, self._ctx)
        self._render(detail)
        return detail
