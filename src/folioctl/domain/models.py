"""Portfolio records: domains, technologies, projects.

All records are frozen; the catalog is built once and never mutated.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from folioctl.domain.periods import coerce_period_value


class Period(BaseModel):
    """Active span of a domain or project."""

    model_config = {"frozen": True}

    start: date
    end: date | Literal["present"]

    @field_validator("start", "end", mode="before")
    @classmethod
    def _coerce_bound(cls, value: Any) -> Any:
        return coerce_period_value(value)


class KeyCommit(BaseModel):
    """A notable commit listed on a domain's detail page."""

    model_config = {"frozen": True}

    hash: str
    message: str
    date: str


class Technology(BaseModel):
    """Display metadata for a technology id."""

    model_config = {"frozen": True}

    name: str
    color: str | None = None


class Domain(BaseModel):
    """One subject-matter work area — the primary filterable record.

    Attributes:
        id: Stable slug, unique within the catalog.
        technologies: Technology ids in display order. Duplicates are
            tolerated; filtering and overlap treat them as a set.
    """

    model_config = {"frozen": True}

    id: str
    name: str
    short_name: str
    description: str
    color: str
    period: Period
    commit_count: int = Field(ge=0)
    technologies: tuple[str, ...] = ()
    highlights: tuple[str, ...] = ()
    key_commits: tuple[KeyCommit, ...] = ()

    @property
    def technology_set(self) -> frozenset[str]:
        return frozenset(self.technologies)


class Project(BaseModel):
    """A deep-dive case study associated with one or more domains."""

    model_config = {"frozen": True}

    id: str
    name: str
    domains: tuple[str, ...] = ()
    period: Period | None = None
    category: str = ""
