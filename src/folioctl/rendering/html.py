"""HTML adapter — renders view models through Jinja2 templates.

This is the replaceable edge of the pipeline: controllers hand view models
to any callable, and :class:`PageDocument` is the stock one that keeps the
rendered HTML of each named page region.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from folioctl.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from jinja2 import Environment

    from folioctl.rendering.views import DomainDetail, ListingPage

TEMPLATE_GROUP = "site"

# Region id -> partial template.
LISTING_REGIONS: dict[str, str] = {
    "techFilters": "_filters.html",
    "domainGrid": "_cards.html",
}
DETAIL_REGIONS: dict[str, str] = {
    "techBadges": "_badges.html",
    "highlightsGrid": "_highlights.html",
    "commitsContainer": "_commits.html",
    "relatedDomains": "_related_domains.html",
    "relatedProjects": "_related_projects.html",
}


class HtmlRenderer:
    """Render listing and detail view models to HTML strings."""

    def __init__(
        self,
        env: Environment | None = None,
        *,
        site_title: str = "Portfolio",
        author: str = "",
        project_root: Path | None = None,
    ) -> None:
        self._env = env or build_template_environment(TEMPLATE_GROUP, project_root=project_root)
        self._globals = {"site_title": site_title, "author": author}

    def render_listing(self, page: ListingPage) -> str:
        return self._env.get_template("listing.html").render(page=page, **self._globals)

    def render_detail(self, detail: DomainDetail) -> str:
        return self._env.get_template("detail.html").render(detail=detail, **self._globals)

    def listing_regions(self, page: ListingPage) -> dict[str, str]:
        """Inner HTML for each listing region, plus count and clear-button state."""
        regions = {
            region: self._env.get_template(name).render(page=page)
            for region, name in LISTING_REGIONS.items()
        }
        regions["domainCount"] = str(page.count)
        regions["clearFilters"] = "block" if page.show_clear else "none"
        return regions

    def detail_regions(self, detail: DomainDetail) -> dict[str, str]:
        """Inner HTML for each detail region.

        The related-projects region is omitted when there is nothing to show,
        leaving its section hidden.
        """
        regions: dict[str, str] = {}
        for region, name in DETAIL_REGIONS.items():
            if region == "relatedProjects" and not detail.show_related_projects:
                continue
            regions[region] = self._env.get_template(name).render(detail=detail)
        return regions


class PageDocument:
    """In-memory page whose regions are replaced on every render.

    Callable with a ListingPage or DomainDetail, so it plugs straight into
    the controllers as their render sink.
    """

    def __init__(self, renderer: HtmlRenderer) -> None:
        self._renderer = renderer
        self.regions: dict[str, str] = {}
        self.html: str = ""
        self.renders = 0

    def __call__(self, view: ListingPage | DomainDetail) -> None:
        from folioctl.rendering.views import ListingPage

        if isinstance(view, ListingPage):
            self.regions = self._renderer.listing_regions(view)
            self.html = self._renderer.render_listing(view)
        else:
            self.regions = self._renderer.detail_regions(view)
            self.html = self._renderer.render_detail(view)
        self.renders += 1
