"""Page address contract — QueryState <-> query string, detail ids from paths.

Only non-default values are written, so an unfiltered listing has a bare
URL. Reading is forgiving: unknown tags are dropped and an unknown sort
falls back to ``commits``. URL writes always replace the current history
entry.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol
from urllib.parse import parse_qs, urlencode, urlsplit

from folioctl.domain.state import QueryState
from folioctl.domain.types import DEFAULT_SORT, SortKey

TECH_PARAM = "tech"
SORT_PARAM = "sort"
SEARCH_PARAM = "q"


class History(Protocol):
    """Minimal browser-history surface the synchronizer writes to."""

    def replace_state(self, url: str) -> None: ...


def serialize(state: QueryState) -> str:
    """Encode *state* as a query string (no leading ``?``).

    Tags are comma-joined in sorted order under one key; the search text is
    trimmed. The default state encodes to ``""``.

    Examples:
        >>> serialize(QueryState({"kotlin", "java"}, SortKey.ALPHA, " sso "))
        'tech=java,kotlin&sort=alpha&q=sso'
    """
    params: list[tuple[str, str]] = []
    if state.selected_techs:
        params.append((TECH_PARAM, ",".join(sorted(state.selected_techs))))
    if state.sort_key != DEFAULT_SORT:
        params.append((SORT_PARAM, str(state.sort_key)))
    search = state.search_query.strip()
    if search:
        params.append((SEARCH_PARAM, search))
    return urlencode(params, safe=",")


def deserialize(query_string: str, available_techs: Iterable[str] | None = None) -> QueryState:
    """Decode a query string into a fresh QueryState.

    Args:
        query_string: Raw ``location.search`` value, with or without ``?``.
        available_techs: Tag ids that have a filter control. Other ids are
            ignored. ``None`` accepts every id.
    """
    params = parse_qs(query_string.removeprefix("?"))

    def first(key: str) -> str | None:
        values = params.get(key)
        return values[0] if values else None

    allowed = None if available_techs is None else set(available_techs)
    techs: set[str] = set()
    raw_techs = first(TECH_PARAM)
    if raw_techs:
        for tech in raw_techs.split(","):
            tech = tech.strip()
            if tech and (allowed is None or tech in allowed):
                techs.add(tech)

    return QueryState(
        selected_techs=techs,
        sort_key=SortKey.parse(first(SORT_PARAM)),
        search_query=first(SEARCH_PARAM) or "",
    )


def build_url(path: str, state: QueryState) -> str:
    """Join *path* with the serialized state, omitting an empty query."""
    query = serialize(state)
    return f"{path}?{query}" if query else path


def sync_location(history: History, path: str, state: QueryState) -> str:
    """Write *state* to the address bar without adding a history entry."""
    url = build_url(path, state)
    history.replace_state(url)
    return url


def split_location(url: str) -> tuple[str, str]:
    """Split a URL or path into ``(path, query)``."""
    parts = urlsplit(url)
    return parts.path, parts.query


def record_id_from_path(path: str) -> str:
    """Detail-page identifier: last path segment minus any extension.

    Examples:
        >>> record_id_from_path("/site/domain/sso.html")
        'sso'
        >>> record_id_from_path("domain/billing")
        'billing'
    """
    segment = urlsplit(path).path.rstrip("/").rsplit("/", 1)[-1]
    stem, dot, _ext = segment.rpartition(".")
    return stem if dot and stem else segment


def extract_query(url_or_query: str) -> str:
    """Query part of a URL, or the input itself when it has no ``?``."""
    if "?" in url_or_query:
        return url_or_query.partition("?")[2]
    return url_or_query
