"""
Dates component - Data models.
"""

from __future__ import annotations

from datetime import date
from typing import Literal, NamedTuple

WeekStart = Literal["sunday", "monday"]

_MONTH_ABBR = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


class MonthKey(NamedTuple):
    """Calendar month identity. Ordered by (year, month)."""

    year: int
    month: int

    @classmethod
    def of(cls, value: date) -> MonthKey:
        return cls(value.year, value.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def short_label(self) -> str:
        """Month abbreviation, e.g. ``Jan``."""
        return _MONTH_ABBR[self.month - 1]

    @property
    def label(self) -> str:
        """Month abbreviation with two-digit year, e.g. ``Jan 24``."""
        return f"{self.short_label} {self.year % 100:02d}"

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
