"""
Reports component - Read-side entry points.

Shell Layer - reads snapshots from the sources, takes "today" from the time
port, and delegates to the date, filter, finance and timeseries cores.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from src.components.dates import WeekStart
from src.components.filters import (
    VehicleFilter,
    filter_expense_vehicles,
    filter_expenses_by_window,
    filter_sales,
    filter_vehicles,
)
from src.components.finance import (
    expenses_by_vehicle,
    fleet_stats,
    sales_summary,
    sum_amounts,
    vehicle_financials,
)
from src.components.timeseries import (
    build_fixed_window_series,
    build_monthly_series,
    peak_sales_month,
)
from src.domain.entities import Expense

from .models import (
    DashboardOutput,
    ExpenseReportOutput,
    ExpenseReportQuery,
    InventoryItem,
    InventoryOutput,
    InventoryQuery,
    SalesReportOutput,
    SalesReportQuery,
    VehicleExpenseGroup,
)
from .ports import ExpenseSourcePort, TimePort, VehicleSourcePort

logger = logging.getLogger(__name__)


def run_dashboard(
    vehicles: VehicleSourcePort,
    expenses: ExpenseSourcePort,
    time: TimePort,
) -> DashboardOutput:
    """Fleet stats and monthly purchase/sale activity."""
    fleet = vehicles.list_vehicles()
    stats = fleet_stats(fleet, expenses.list_expenses())
    return DashboardOutput(
        stats=stats,
        monthly_activity=build_monthly_series(fleet, today=time.today()),
    )


def run_inventory(
    input_data: InventoryQuery,
    vehicles: VehicleSourcePort,
    expenses: ExpenseSourcePort,
) -> InventoryOutput:
    """Filtered vehicles, each with its money summary."""
    fleet = vehicles.list_vehicles()
    totals = expenses_by_vehicle(expenses.list_expenses(), (v.id for v in fleet))
    criteria = VehicleFilter(
        status=input_data.status,
        search_term=input_data.search_term,
        exact_date=input_data.exact_date.strip(),
    )

    items = tuple(
        InventoryItem(vehicle=v, financials=vehicle_financials(v, totals))
        for v in filter_vehicles(fleet, criteria)
    )
    return InventoryOutput(items=items, total=len(items))


def run_sales_report(
    input_data: SalesReportQuery,
    vehicles: VehicleSourcePort,
    expenses: ExpenseSourcePort,
    time: TimePort,
) -> SalesReportOutput:
    """
    Sold vehicles matching the query, plus the header figures and chart.

    Raises:
        ValueError: If ``window_months`` is less than 1.
    """
    fleet = vehicles.list_vehicles()
    sold = [v for v in fleet if v.status == "Sold"]
    totals = expenses_by_vehicle(expenses.list_expenses(), (v.id for v in fleet))

    monthly = build_fixed_window_series(
        sold, today=time.today(), window_months=input_data.window_months
    )
    items = tuple(
        InventoryItem(vehicle=v, financials=vehicle_financials(v, totals))
        for v in filter_sales(sold, input_data.search_term, input_data.sale_date.strip())
    )

    return SalesReportOutput(
        items=items,
        summary=sales_summary(sold, totals),
        monthly_sales=monthly,
        peak_month=peak_sales_month(monthly),
    )


def run_expense_report(
    input_data: ExpenseReportQuery,
    vehicles: VehicleSourcePort,
    expenses: ExpenseSourcePort,
    time: TimePort,
    week_starts_on: WeekStart = "sunday",
) -> ExpenseReportOutput:
    """
    Expenses inside the window, grouped under each vehicle matching the search.

    Every matching vehicle gets a group, even with no expenses in the window.
    """
    shown = filter_expense_vehicles(vehicles.list_vehicles(), input_data.search_term)
    windowed = filter_expenses_by_window(
        expenses.list_expenses(),
        input_data.window,
        today=time.today(),
        week_starts_on=week_starts_on,
    )

    by_vehicle: dict[str, list[Expense]] = defaultdict(list)
    for expense in windowed:
        by_vehicle[expense.vehicle_id].append(expense)

    groups = []
    for vehicle in shown:
        own = sorted(by_vehicle.get(vehicle.id, []), key=lambda e: e.date, reverse=True)
        groups.append(
            VehicleExpenseGroup(vehicle=vehicle, expenses=tuple(own), total=sum_amounts(own))
        )

    total_amount = sum((g.total for g in groups), 0.0)
    logger.debug(
        "Expense report %s: %d vehicles, %d windowed expenses",
        input_data.window.mode,
        len(groups),
        len(windowed),
    )
    return ExpenseReportOutput(
        groups=tuple(groups),
        total_amount=total_amount,
        window_label=input_data.window.label,
    )
