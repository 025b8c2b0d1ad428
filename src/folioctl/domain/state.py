"""QueryState — the listing page's filter, sort, and search selection.

Created from the page location at load, mutated in place by the listing
controller, and written back to the location after every change.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from folioctl.domain.types import DEFAULT_SORT, SortKey


@dataclass
class QueryState:
    """Selected technology tags, sort mode, and free-text search."""

    selected_techs: set[str] = field(default_factory=set)
    sort_key: SortKey = DEFAULT_SORT
    search_query: str = ""

    @classmethod
    def build(
        cls,
        *,
        techs: Iterable[str] = (),
        sort: str | None = None,
        search: str | None = None,
    ) -> QueryState:
        """Construct from loose inputs (CLI flags, form values)."""
        return cls(
            selected_techs={t for t in techs if t},
            sort_key=SortKey.parse(sort),
            search_query=search or "",
        )

    @property
    def normalized_query(self) -> str:
        """Trimmed, lower-cased search text ("" means no search)."""
        return self.search_query.strip().lower()

    @property
    def has_filters(self) -> bool:
        """True when a tag or search narrows the result set."""
        return bool(self.selected_techs) or bool(self.search_query.strip())

    @property
    def is_default(self) -> bool:
        return not self.has_filters and self.sort_key == DEFAULT_SORT

    def toggle_tech(self, tech_id: str) -> bool:
        """Flip *tech_id* in the selection. Returns True if now selected."""
        if tech_id in self.selected_techs:
            self.selected_techs.discard(tech_id)
            return False
        self.selected_techs.add(tech_id)
        return True

    def clear(self) -> None:
        """Reset to the default state."""
        self.selected_techs.clear()
        self.sort_key = DEFAULT_SORT
        self.search_query = ""

    def canonical(self) -> QueryState:
        """Copy with the search text trimmed, as it appears in a URL."""
        return QueryState(
            selected_techs=set(self.selected_techs),
            sort_key=self.sort_key,
            search_query=self.search_query.strip(),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "techs": sorted(self.selected_techs),
            "sort": str(self.sort_key),
            "search": self.search_query.strip(),
        }
