"""
Dates component - Calendar date normalization.

Every other component compares dates through this module, never through
mixed raw-string and parsed comparisons.
"""

from ._impl import (
    add_months,
    iter_months,
    month_start,
    parse_local_date,
    start_of_week,
)
from .models import MonthKey, WeekStart

__all__ = [
    "MonthKey",
    "WeekStart",
    "add_months",
    "iter_months",
    "month_start",
    "parse_local_date",
    "start_of_week",
]
