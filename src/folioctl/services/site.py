"""SiteService — render the listing and every detail page to static HTML.

Pages are produced by the same controllers that drive interactive use, with
an in-memory location and history standing in for the browser.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from folioctl.controllers.detail import DetailController
from folioctl.controllers.listing import ListingController
from folioctl.controllers.location import InMemoryHistory, Location
from folioctl.rendering.html import HtmlRenderer, PageDocument
from folioctl.rendering.views import ProjectionContext
from folioctl.services.base import BaseService
from folioctl.services.result import ServiceError, ServiceResult
from folioctl.services.urlstate import extract_query

logger = logging.getLogger(__name__)


class SiteService(BaseService):
    """Static site generation over the catalog."""

    def build(self, output_dir: Path, *, url: str | None = None) -> ServiceResult:
        """Write the listing page and one page per domain under *output_dir*.

        *url* seeds the listing page's initial state, exactly as a browser
        address would.
        """
        settings = self._settings
        site = settings.site
        output_dir = output_dir.resolve()
        renderer = HtmlRenderer(
            site_title=site.title,
            author=site.author,
            project_root=settings.project_root,
        )
        ctx = ProjectionContext.from_catalog(self._catalog, settings)
        warnings: list[str] = []
        pages: list[str] = []

        listing_doc = PageDocument(renderer)
        search = extract_query(url) if url else ""
        history = InMemoryHistory(Location(pathname=site.listing_page, search=search))
        listing = ListingController(
            self._catalog,
            location=history.location,
            history=history,
            render=listing_doc,
            ctx=ctx,
            config=settings.listing,
        )
        page = listing.load()

        try:
            self._write(output_dir / site.listing_page, listing_doc.html)
            pages.append(site.listing_page)

            detail_doc = PageDocument(renderer)
            detail = DetailController(
                self._catalog,
                render=detail_doc,
                ctx=ctx,
                related_limit=settings.detail.related_limit,
            )
            for domain in self._catalog.domains:
                rel = f"{site.detail_dir}/{domain.id}.html"
                if detail.load(rel) is None:
                    warnings.append(f"Skipped {rel}: domain not found")
                    continue
                self._write(output_dir / rel, detail_doc.html)
                pages.append(rel)
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op="build_site",
                error=ServiceError(
                    code="WRITE_FAILED",
                    message=f"Cannot write site to {output_dir}: {exc}",
                    detail={"output": str(output_dir)},
                ),
            )

        data: dict[str, Any] = {
            "output": str(output_dir),
            "listing_url": page.url,
            "count": len(pages),
            "pages": pages,
        }
        return ServiceResult(ok=True, op="build_site", data=data, warnings=warnings)

    @staticmethod
    def _write(path: Path, html: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        logger.debug("Wrote %s", path)
