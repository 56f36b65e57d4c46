"""
FilterEngine - Composable inclusion tests over vehicles and expenses.

Functional Core - pure business logic.

Key behaviors:
- Vehicle criteria compose with AND: status, search term, exact date
- Expense windows are either relative to today (today/week/month) or an
  absolute custom range compared as raw ``YYYY-MM-DD`` strings
- Records with unparseable dates never pass a date-restricted window
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from src.components.dates import WeekStart, month_start, parse_local_date, start_of_week
from src.components.search import (
    EXPENSE_SEARCH_FIELDS,
    SALES_SEARCH_FIELDS,
    filter_vehicles_by_search,
    matches,
    normalize_term,
)
from src.domain.entities import Expense, Vehicle

from .models import ExpenseWindow, VehicleFilter

# --- Vehicle Filters ---


def _sale_date(vehicle: Vehicle) -> str | None:
    sale = vehicle.sale_facts
    return sale.sale_date if sale is not None else None


def vehicle_passes(vehicle: Vehicle, criteria: VehicleFilter) -> bool:
    """Single-vehicle inclusion test for the inventory criteria."""
    if criteria.status != "All" and vehicle.status != criteria.status:
        return False

    if not matches(vehicle, criteria.search_term):
        return False

    if criteria.exact_date:
        return criteria.exact_date in (vehicle.purchase_date, _sale_date(vehicle))

    return True


def filter_vehicles(vehicles: Iterable[Vehicle], criteria: VehicleFilter) -> list[Vehicle]:
    """Vehicles passing every active criterion, input order preserved."""
    return [v for v in vehicles if vehicle_passes(v, criteria)]


def filter_sales(
    sold_vehicles: Iterable[Vehicle],
    search_term: str = "",
    sale_date: str = "",
) -> list[Vehicle]:
    """
    Sales report list: search over model, number and buyer, exact sale date.

    Sorted newest sale first; vehicles without a usable sale date go last.
    """
    term = normalize_term(search_term)
    selected = [
        v
        for v in sold_vehicles
        if matches(v, term, SALES_SEARCH_FIELDS) and (not sale_date or _sale_date(v) == sale_date)
    ]

    parsed = {v.id: parse_local_date(_sale_date(v)) for v in selected}
    dated = [v for v in selected if parsed[v.id] is not None]
    undated = [v for v in selected if parsed[v.id] is None]
    dated.sort(key=lambda v: parsed[v.id] or date.min, reverse=True)
    return dated + undated


def filter_expense_vehicles(vehicles: Iterable[Vehicle], search_term: str = "") -> list[Vehicle]:
    """Vehicles shown on the expense view: search by model or number only."""
    return filter_vehicles_by_search(vehicles, search_term, EXPENSE_SEARCH_FIELDS)


# --- Expense Windows ---


def _in_custom_range(raw: str, window: ExpenseWindow) -> bool:
    if window.start and raw < window.start:
        return False
    if window.end and raw > window.end:
        return False
    return True


def expense_in_window(
    expense: Expense,
    window: ExpenseWindow,
    today: date,
    week_starts_on: WeekStart = "sunday",
) -> bool:
    """Single-expense inclusion test for a date window."""
    if window.mode == "all":
        return True

    if window.mode == "custom" and not window.start and not window.end:
        return True

    expense_date = parse_local_date(expense.date)
    if expense_date is None:
        return False

    if window.mode == "today":
        return expense_date == today
    if window.mode == "week":
        return expense_date >= start_of_week(today, week_starts_on)
    if window.mode == "month":
        return expense_date >= month_start(today)

    # custom: raw strings sort in calendar order for YYYY-MM-DD
    return _in_custom_range(expense.date.strip()[:10], window)


def filter_expenses_by_window(
    expenses: Iterable[Expense],
    window: ExpenseWindow,
    today: date | None = None,
    week_starts_on: WeekStart = "sunday",
) -> list[Expense]:
    """Expenses inside the window, input order preserved."""
    reference = today or date.today()
    return [e for e in expenses if expense_in_window(e, window, reference, week_starts_on)]
