"""Classification enums shared by the query, URL, and view layers."""

from __future__ import annotations

from enum import StrEnum


class SortKey(StrEnum):
    """Listing sort modes."""

    COMMITS = "commits"
    RECENT = "recent"
    ALPHA = "alpha"

    @classmethod
    def parse(cls, value: str | None) -> SortKey:
        """Coerce untrusted input to a sort key, falling back to ``commits``."""
        if value is None:
            return cls.COMMITS
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.COMMITS


DEFAULT_SORT = SortKey.COMMITS
