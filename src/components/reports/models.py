"""
Reports component - View models for dashboard, inventory, sales and expenses.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.components.dates import MonthKey
from src.components.filters import ExpenseWindow, StatusFilter
from src.components.finance import DashboardStats, SalesSummary, VehicleFinancials
from src.components.timeseries import DEFAULT_WINDOW_MONTHS, MonthlyActivity, MonthlySales
from src.domain.entities import Expense, Vehicle

# --- Dashboard ---


@dataclass(frozen=True)
class DashboardOutput:
    """Fleet figures plus the purchase/sale activity chart."""

    stats: DashboardStats
    monthly_activity: tuple[MonthlyActivity, ...]


# --- Inventory ---


@dataclass(frozen=True)
class InventoryQuery:
    status: StatusFilter = "All"
    search_term: str = ""
    exact_date: str = ""


@dataclass(frozen=True)
class InventoryItem:
    vehicle: Vehicle
    financials: VehicleFinancials


@dataclass(frozen=True)
class InventoryOutput:
    items: tuple[InventoryItem, ...]
    total: int


# --- Sales ---


@dataclass(frozen=True)
class SalesReportQuery:
    """Input for the sales report. ``sale_date`` is an exact ``YYYY-MM-DD`` match."""

    search_term: str = ""
    sale_date: str = ""
    window_months: int = DEFAULT_WINDOW_MONTHS


@dataclass(frozen=True)
class SalesReportOutput:
    """
    Sales report.

    ``summary`` covers every sold vehicle; ``items`` only those passing the
    query. ``peak_month`` is None when the window holds no sales.
    """

    items: tuple[InventoryItem, ...]
    summary: SalesSummary
    monthly_sales: tuple[MonthlySales, ...]
    peak_month: MonthKey | None


# --- Expenses ---


@dataclass(frozen=True)
class ExpenseReportQuery:
    window: ExpenseWindow = field(default_factory=ExpenseWindow)
    search_term: str = ""


@dataclass(frozen=True)
class VehicleExpenseGroup:
    """One vehicle and its expenses inside the window, newest first."""

    vehicle: Vehicle
    expenses: tuple[Expense, ...]
    total: float


@dataclass(frozen=True)
class ExpenseReportOutput:
    groups: tuple[VehicleExpenseGroup, ...]
    total_amount: float
    window_label: str
