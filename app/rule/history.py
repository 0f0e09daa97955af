"""
Month calendar helpers for the history view.

Months are ``YYYY-MM`` strings.  The grid starts on Sunday and is padded
with blank cells to whole weeks.
"""

from __future__ import annotations

import calendar
import datetime
import re
from dataclasses import dataclass
from typing import Optional

from app.rule.clock import parse_local_date, sunday_first_weekday
from app.rule.errors import InvalidInputError

_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")


@dataclass(frozen=True)
class MonthBounds:
    year: int
    month: int
    days_in_month: int
    start: datetime.date
    end: datetime.date


def is_valid_month(value: Optional[str]) -> bool:
    if not value or not _MONTH_RE.match(value):
        return False
    return 1 <= int(value[5:]) <= 12


def parse_month(value: str) -> tuple[int, int]:
    if not is_valid_month(value):
        raise InvalidInputError(f"Invalid month: {value!r}")
    return int(value[:4]), int(value[5:])


def month_of(day: datetime.date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def resolve_month(value: Optional[str], today: datetime.date) -> str:
    """*value* when it is a valid month, else the month of *today*."""
    return value if is_valid_month(value) else month_of(today)


def add_months(month: str, delta: int) -> str:
    year, m = parse_month(month)
    total = year * 12 + (m - 1) + delta
    return f"{total // 12:04d}-{total % 12 + 1:02d}"


def month_bounds(month: str) -> MonthBounds:
    year, m = parse_month(month)
    days = calendar.monthrange(year, m)[1]
    return MonthBounds(year=year, month=m, days_in_month=days,
                       start=datetime.date(year, m, 1), end=datetime.date(year, m, days))


def month_title(month: str) -> str:
    """``'March 2026'``."""
    year, m = parse_month(month)
    return f"{calendar.month_name[m]} {year}"


def month_cells(month: str) -> list[Optional[datetime.date]]:
    """Dates of *month* laid out Sunday-first, ``None`` for padding cells."""
    bounds = month_bounds(month)
    leading = sunday_first_weekday(bounds.start)
    total = -(-(leading + bounds.days_in_month) // 7) * 7

    cells: list[Optional[datetime.date]] = []
    for idx in range(total):
        day = idx - leading + 1
        if 1 <= day <= bounds.days_in_month:
            cells.append(datetime.date(bounds.year, bounds.month, day))
        else:
            cells.append(None)
    return cells


def selected_date_in_month(value: Optional[str], month: str) -> Optional[datetime.date]:
    """Parse *value* and keep it only if it falls inside *month*."""
    if not value:
        return None
    try:
        day = parse_local_date(value)
    except InvalidInputError:
        return None
    return day if month_of(day) == month else None
