"""
FinancialAggregator - Investment and profit figures joining vehicles to expenses.

Functional Core - pure business logic.

Key behaviors:
- Expense totals are summed per vehicle id; a vehicle with no expenses is
  absent from the map and reads as zero
- Capital is "invested" only while a vehicle is unsold
- Profit exists only for sold vehicles (None otherwise); an absent selling
  price counts as 0
- Expenses whose vehicle is not in the snapshot never reach any figure
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from src.domain.entities import Expense, Vehicle

from .models import DashboardStats, SalesSummary, VehicleFinancials

logger = logging.getLogger(__name__)


# --- Expense Totals ---


def expenses_by_vehicle(
    expenses: Iterable[Expense],
    vehicle_ids: Iterable[str] | None = None,
) -> dict[str, float]:
    """
    Sum expense amounts per vehicle id.

    When ``vehicle_ids`` is given, expenses for any other id are orphans and
    are dropped.
    """
    known = set(vehicle_ids) if vehicle_ids is not None else None
    totals: dict[str, float] = {}
    orphans = 0

    for expense in expenses:
        if known is not None and expense.vehicle_id not in known:
            orphans += 1
            continue
        totals[expense.vehicle_id] = totals.get(expense.vehicle_id, 0.0) + expense.amount

    if orphans:
        logger.debug("Ignored %d orphaned expenses", orphans)
    return totals


def expense_total(totals: Mapping[str, float], vehicle_id: str) -> float:
    return totals.get(vehicle_id, 0.0)


def sum_amounts(expenses: Iterable[Expense]) -> float:
    return sum((e.amount for e in expenses), 0.0)


# --- Investment & Profit ---


def total_invested(vehicles: Iterable[Vehicle], totals: Mapping[str, float]) -> float:
    """Purchase price plus expenses over every vehicle not yet sold."""
    return sum(
        (v.purchase_price + expense_total(totals, v.id) for v in vehicles if v.status != "Sold"),
        0.0,
    )


def profit(vehicle: Vehicle, totals: Mapping[str, float]) -> float | None:
    """
    Selling price minus purchase price minus expenses.

    None for unsold stock: there is no profit figure to show for it.
    """
    sale = vehicle.sale_facts
    if vehicle.status != "Sold" or sale is None:
        return None

    selling_price = sale.selling_price or 0.0
    return selling_price - vehicle.purchase_price - expense_total(totals, vehicle.id)


def fleet_stats(vehicles: Iterable[Vehicle], expenses: Iterable[Expense]) -> DashboardStats:
    """Dashboard totals over the whole fleet."""
    fleet = list(vehicles)
    totals = expenses_by_vehicle(expenses, (v.id for v in fleet))

    total_profit = 0.0
    for vehicle in fleet:
        sale = vehicle.sale_facts
        if sale is None or sale.selling_price is None:
            continue
        total_profit += profit(vehicle, totals) or 0.0

    return DashboardStats(
        total_vehicles=len(fleet),
        current_stock=sum(1 for v in fleet if v.status != "Sold"),
        available_count=sum(1 for v in fleet if v.status == "Available"),
        total_invested=total_invested(fleet, totals),
        total_profit=total_profit,
    )


def sales_summary(sold_vehicles: Iterable[Vehicle], totals: Mapping[str, float]) -> SalesSummary:
    """
    Profit over a list of sold vehicles.

    Precondition: callers pass Sold vehicles only. Anything else has no
    profit and adds nothing, but is still not a sale, so it is not counted.
    """
    count = 0
    total = 0.0
    for vehicle in sold_vehicles:
        value = profit(vehicle, totals)
        if value is None:
            continue
        count += 1
        total += value
    return SalesSummary(sale_count=count, total_profit=total)


def vehicle_financials(vehicle: Vehicle, totals: Mapping[str, float]) -> VehicleFinancials:
    """Money summary for one vehicle card."""
    spent_on_expenses = expense_total(totals, vehicle.id)
    sale = vehicle.sale_facts

    return VehicleFinancials(
        purchase_price=vehicle.purchase_price,
        purchase_balance=vehicle.purchase_balance or 0.0,
        total_expenses=spent_on_expenses,
        total_spent=vehicle.purchase_price + spent_on_expenses,
        amount_released=(sale.selling_price or 0.0) if sale is not None else None,
        sale_balance=(sale.sale_balance or 0.0) if sale is not None else None,
        profit=profit(vehicle, totals),
    )
