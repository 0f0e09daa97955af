"""Tests for the month calendar helpers."""

import datetime

import pytest

from app.rule.errors import InvalidInputError
from app.rule.history import (
    add_months,
    is_valid_month,
    month_bounds,
    month_cells,
    month_title,
    resolve_month,
    selected_date_in_month,
)

D = datetime.date


class TestMonthParsing:
    @pytest.mark.parametrize("value,valid", [
        ("2026-03", True),
        ("2026-12", True),
        ("2026-13", False),
        ("2026-00", False),
        ("2026-3", False),
        ("", False),
        (None, False),
    ])
    def test_is_valid_month(self, value, valid):
        assert is_valid_month(value) is valid

    def test_resolve_month_falls_back_to_today(self):
        assert resolve_month("bogus", D(2026, 3, 6)) == "2026-03"
        assert resolve_month("2025-11", D(2026, 3, 6)) == "2025-11"

    def test_bounds(self):
        bounds = month_bounds("2024-02")
        assert bounds.days_in_month == 29
        assert (bounds.start, bounds.end) == (D(2024, 2, 1), D(2024, 2, 29))

    def test_bounds_invalid(self):
        with pytest.raises(InvalidInputError):
            month_bounds("2026-13")

    def test_add_months_crosses_years(self):
        assert add_months("2026-01", -1) == "2025-12"
        assert add_months("2026-12", 1) == "2027-01"

    def test_title(self):
        assert month_title("2026-03") == "March 2026"


class TestMonthCells:
    def test_month_starting_on_sunday(self):
        cells = month_cells("2026-03")
        assert len(cells) == 35
        assert cells[0] == D(2026, 3, 1)
        assert cells[30] == D(2026, 3, 31)
        assert cells[31:] == [None] * 4

    def test_exact_four_weeks(self):
        cells = month_cells("2026-02")
        assert len(cells) == 28
        assert None not in cells

    def test_leading_padding(self):
        cells = month_cells("2026-08")
        assert cells[:6] == [None] * 6
        assert cells[6] == D(2026, 8, 1)
        assert len(cells) == 42


class TestSelectedDate:
    def test_inside_month(self):
        assert selected_date_in_month("2026-03-14", "2026-03") == D(2026, 3, 14)

    @pytest.mark.parametrize("value", ["2026-04-01", "not-a-date", None, ""])
    def test_rejected(self, value):
        assert selected_date_in_month(value, "2026-03") is None
