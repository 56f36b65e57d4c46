"""
Filters component - Criteria value objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from src.domain.entities import VehicleStatus

StatusFilter = VehicleStatus | Literal["All"]
WindowMode = Literal["all", "today", "week", "month", "custom"]

WINDOW_MODES: tuple[WindowMode, ...] = ("all", "today", "week", "month", "custom")

WINDOW_LABELS: dict[WindowMode, str] = {
    "month": "This Month",
    "week": "This Week",
    "today": "Today",
    "all": "All Time",
    "custom": "Custom Range",
}


@dataclass(frozen=True)
class VehicleFilter:
    """Inventory filter criteria. Empty strings mean inactive."""

    status: StatusFilter = "All"
    search_term: str = ""
    exact_date: str = ""

    @property
    def is_noop(self) -> bool:
        return self.status == "All" and not self.search_term.strip() and not self.exact_date


@dataclass(frozen=True)
class ExpenseWindow:
    """
    Expense date window.

    ``start``/``end`` only apply in ``custom`` mode and are inclusive
    ``YYYY-MM-DD`` bounds; an empty bound is unbounded.
    """

    mode: WindowMode = "all"
    start: str = ""
    end: str = ""

    @property
    def label(self) -> str:
        return WINDOW_LABELS[self.mode]
