"""
Calendar date normalization and month arithmetic.

Functional Core - pure functions, no I/O.

Key behaviors:
- Storage dates are ``YYYY-MM-DD`` strings; they normalize to ``datetime.date``
- Absent or malformed input normalizes to None, never raises
- A ``date`` has no time-of-day or tzinfo, so equal calendar days compare equal
  regardless of the host timezone
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from datetime import date, timedelta

from .models import MonthKey, WeekStart

_DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})(?:[T ].*)?$")

# date.weekday(): Monday=0 ... Sunday=6
_WEEK_START_WEEKDAY: dict[str, int] = {"monday": 0, "sunday": 6}


def parse_local_date(value: str | None) -> date | None:
    """
    Parse a ``YYYY-MM-DD`` string into a calendar date.

    A trailing time part (``2024-01-15T10:00:00``) is ignored; only the
    calendar day is kept. Returns None for empty or unparseable input,
    including impossible days such as ``2024-02-30``.
    """
    if not value:
        return None

    match = _DATE_RE.match(value.strip())
    if match is None:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def month_start(value: date) -> date:
    """First day of the month containing ``value``."""
    return value.replace(day=1)


def add_months(value: date, months: int) -> date:
    """Shift to the first day of the month ``months`` away (may be negative)."""
    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def iter_months(start: date, end: date) -> Iterator[MonthKey]:
    """Yield every month from ``start`` to ``end`` inclusive."""
    current = month_start(start)
    last = month_start(end)
    while current <= last:
        yield MonthKey.of(current)
        current = add_months(current, 1)


def start_of_week(value: date, week_starts_on: WeekStart = "sunday") -> date:
    """Most recent week start on or before ``value``."""
    first_weekday = _WEEK_START_WEEKDAY[week_starts_on]
    offset = (value.weekday() - first_weekday) % 7
    return value - timedelta(days=offset)
