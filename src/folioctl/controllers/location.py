"""Page location and history stand-ins for running controllers off-browser."""

from __future__ import annotations

from dataclasses import dataclass, field

from folioctl.services.urlstate import split_location


@dataclass
class Location:
    """The current page address, split into path and query string."""

    pathname: str
    search: str = ""

    @classmethod
    def parse(cls, url: str) -> Location:
        path, query = split_location(url)
        return cls(pathname=path, search=query)

    @property
    def href(self) -> str:
        return f"{self.pathname}?{self.search}" if self.search else self.pathname


@dataclass
class InMemoryHistory:
    """History that records entries and keeps a Location current.

    ``replace_state`` overwrites the current entry; ``push_state`` exists so
    callers can prove it is never used by the listing controller.
    """

    location: Location
    entries: list[str] = field(default_factory=list)
    replacements: int = 0

    def __post_init__(self) -> None:
        if not self.entries:
            self.entries.append(self.location.href)

    def replace_state(self, url: str) -> None:
        self.entries[-1] = url
        self.replacements += 1
        self._move_to(url)

    def push_state(self, url: str) -> None:
        self.entries.append(url)
        self._move_to(url)

    def _move_to(self, url: str) -> None:
        parsed = Location.parse(url)
        self.location.pathname = parsed.pathname
        self.location.search = parsed.search
