"""
Timeseries component - Bucket models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.components.dates import MonthKey


@dataclass(frozen=True)
class MonthlyActivity:
    """Purchases and sales counted into one calendar month."""

    month: MonthKey
    purchases: int = 0
    sales: int = 0

    @property
    def label(self) -> str:
        return self.month.label


@dataclass(frozen=True)
class MonthlySales:
    """Sales counted into one calendar month of a fixed window."""

    month: MonthKey
    sales: int = 0

    @property
    def label(self) -> str:
        return self.month.short_label
