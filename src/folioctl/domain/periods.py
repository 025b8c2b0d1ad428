"""Activity periods — parsing, ordering, and display.

A period end may be the literal ``"present"``, which orders after every
fixed date.
"""

from __future__ import annotations

import re
from datetime import date
from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from folioctl.domain.models import Period

PRESENT = "present"

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def coerce_period_value(value: Any) -> Any:
    """Normalize a raw period bound before model validation.

    ``"YYYY-MM"`` becomes the first day of that month and ``"present"`` is
    lower-cased. Anything else is passed through for pydantic to validate.

    Examples:
        >>> coerce_period_value("2022-05")
        datetime.date(2022, 5, 1)
        >>> coerce_period_value("Present")
        'present'
    """
    if isinstance(value, str):
        text = value.strip()
        if text.lower() == PRESENT:
            return PRESENT
        match = _MONTH_PATTERN.match(text)
        if match:
            return date(int(match.group(1)), int(match.group(2)), 1)
        return text
    return value


def end_sort_key(period: Period) -> date:
    """Comparable end bound; ``present`` maps to ``date.max``."""
    if period.end == PRESENT:
        return date.max
    return period.end  # type: ignore[return-value]


def recency_key(period: Period) -> tuple[date, date]:
    """Sort key for most-recent-first ordering (use with ``reverse=True``)."""
    return end_sort_key(period), period.start


def format_month(value: date | str) -> str:
    """Render a period bound as ``Mon YYYY`` (or ``Present``)."""
    if value == PRESENT:
        return "Present"
    return cast(date, value).strftime("%b %Y")


def format_period(period: Period) -> str:
    """Render a period as ``"May 2022 - Oct 2025"``."""
    return f"{format_month(period.start)} - {format_month(period.end)}"
