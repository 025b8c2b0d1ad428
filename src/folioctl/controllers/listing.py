"""Listing controller — filter, sort, and search over the whole catalog.

State flows one way: an event mutates the owned :class:`QueryState`, the
query pipeline re-runs, the view projector builds a fresh page, the render
sink receives it, and the new state replaces the current history entry.

Events are serialized on one reentrant lock, since the debounced search
fires on a timer thread. Each scheduled search carries the generation it
was typed in; ``clear_filters`` and ``load`` start a new generation, so a
search that was already in flight when they ran is discarded.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from folioctl.config.models import ListingConfig
from folioctl.controllers.debounce import Debouncer, TimerFactory, thread_timer
from folioctl.domain.state import QueryState
from folioctl.domain.tags import common_technologies
from folioctl.domain.types import SortKey
from folioctl.rendering.views import ListingPage, ProjectionContext, project_listing
from folioctl.services.query import query
from folioctl.services.urlstate import History, deserialize, sync_location

if TYPE_CHECKING:
    from folioctl.controllers.location import Location
    from folioctl.data.catalog import Catalog

logger = logging.getLogger(__name__)

RenderSink = Callable[[ListingPage], object]


class ListingController:
    """Owns the listing page's QueryState and drives re-renders.

    Args:
        catalog: The read-only dataset.
        location: Current page address; its query string seeds the state.
        history: Receives ``replace_state`` after every pipeline run.
        render: Called with each new :class:`ListingPage`.
        ctx: Projection lookups and display limits.
        config: Listing behaviour (debounce, filter tag selection).
        timer_factory: Timer used by the search debounce.
    """

    def __init__(
        self,
        catalog: Catalog,
        *,
        location: Location,
        history: History,
        render: RenderSink,
        ctx: ProjectionContext | None = None,
        config: ListingConfig | None = None,
        timer_factory: TimerFactory = thread_timer,
    ) -> None:
        self._catalog = catalog
        self._location = location
        self._history = history
        self._render = render
        self._ctx = ctx or ProjectionContext(
            technologies=catalog.technologies,
            format_period=catalog.format_period,
            commit_url=catalog.commit_url,
        )
        self._config = config or ListingConfig()
        self._path = location.pathname
        self.state = QueryState()
        self.filter_techs: list[str] = common_technologies(
            catalog.domains,
            min_domains=self._config.filter_min_domains,
            limit=self._config.filter_max_tags,
        )
        self.page: ListingPage | None = None
        self._lock = threading.RLock()
        self._generation = 0
        self._search = Debouncer(
            self._config.debounce_ms,
            self._apply_search,
            timer_factory=timer_factory,
        )

    # ------------------------------------------------------------------
    # events
    # ------------------------------------------------------------------

    def load(self) -> ListingPage:
        """Read state from the location and render the first page."""
        with self._lock:
            self._search.cancel()
            self._generation += 1
            self.state = deserialize(self._location.search, self.filter_techs)
            logger.debug("Listing loaded with state %s", self.state.to_dict())
            return self.refresh()

    def toggle_tech(self, tech_id: str) -> ListingPage:
        with self._lock:
            self.state.toggle_tech(tech_id)
            return self.refresh()

    def set_sort(self, value: str) -> ListingPage:
        with self._lock:
            self.state.sort_key = SortKey.parse(value)
            return self.refresh()

    def search_input(self, text: str) -> None:
        """Record a keystroke; the pipeline runs once input goes quiet."""
        with self._lock:
            self._search(text, self._generation)

    def clear_filters(self) -> ListingPage:
        with self._lock:
            self._search.cancel()
            self._generation += 1
            self.state.clear()
            return self.refresh()

    # ------------------------------------------------------------------
    # debounce access
    # ------------------------------------------------------------------

    @property
    def search_pending(self) -> bool:
        return self._search.pending

    def flush_search(self) -> bool:
        """Apply a pending search immediately."""
        return self._search.flush()

    # ------------------------------------------------------------------
    # pipeline
    # ------------------------------------------------------------------

    def refresh(self) -> ListingPage:
        """Run query, projection, render, and URL sync for the current state."""
        catalog = self._catalog
        with self._lock:
            results = query(catalog.domains, self.state, technologies=catalog.technologies)
            url = sync_location(self._history, self._path, self.state)
            page = project_listing(results, self.state, self.filter_techs, url, self._ctx)
            self._render(page)
            self.page = page
            return page

    def _apply_search(self, text: str, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropped stale search %r", text)
                return
            self.state.search_query = text
            self.refresh()
