"""
Timeseries component - Monthly activity buckets for charts.
"""

from ._impl import (
    DEFAULT_WINDOW_MONTHS,
    build_fixed_window_series,
    build_monthly_series,
    peak_sales_month,
)
from .models import MonthlyActivity, MonthlySales

__all__ = [
    "DEFAULT_WINDOW_MONTHS",
    "MonthlyActivity",
    "MonthlySales",
    "build_fixed_window_series",
    "build_monthly_series",
    "peak_sales_month",
]
