"""Tests for period parsing, ordering, and display."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from folioctl.domain.models import Period
from folioctl.domain.periods import (
    PRESENT,
    coerce_period_value,
    end_sort_key,
    format_month,
    format_period,
    recency_key,
)


class TestCoercePeriodValue:
    def test_month_string(self) -> None:
        assert coerce_period_value("2022-05") == date(2022, 5, 1)

    def test_present_case_insensitive(self) -> None:
        assert coerce_period_value(" Present ") == PRESENT

    def test_passthrough(self) -> None:
        d = date(2020, 1, 15)
        assert coerce_period_value(d) is d
        assert coerce_period_value("2020-01-15") == "2020-01-15"


class TestPeriodModel:
    def test_parses_month_bounds(self) -> None:
        p = Period.model_validate({"start": "2022-05", "end": "2025-10"})
        assert p.start == date(2022, 5, 1)
        assert p.end == date(2025, 10, 1)

    def test_present_end(self) -> None:
        p = Period.model_validate({"start": "2023-01", "end": "present"})
        assert p.end == PRESENT

    def test_rejects_garbage(self) -> None:
        with pytest.raises(ValidationError):
            Period.model_validate({"start": "soon", "end": "present"})


class TestOrdering:
    def test_present_sorts_after_any_date(self) -> None:
        open_ended = Period(start=date(2020, 1, 1), end=PRESENT)
        closed = Period(start=date(2020, 1, 1), end=date(2099, 12, 1))
        assert end_sort_key(open_ended) > end_sort_key(closed)

    def test_recency_key_breaks_ties_on_start(self) -> None:
        early = Period(start=date(2020, 1, 1), end=date(2024, 1, 1))
        late = Period(start=date(2022, 1, 1), end=date(2024, 1, 1))
        assert recency_key(late) > recency_key(early)


class TestFormatting:
    def test_format_month(self) -> None:
        assert format_month(date(2022, 5, 1)) == "May 2022"
        assert format_month(PRESENT) == "Present"

    def test_format_period(self) -> None:
        p = Period.model_validate({"start": "2022-05", "end": "2025-10"})
        assert format_period(p) == "May 2022 - Oct 2025"

    def test_format_open_period(self) -> None:
        p = Period.model_validate({"start": "2023-01", "end": "present"})
        assert format_period(p) == "Jan 2023 - Present"
