"""
Finance component unit tests.

Tests for expense totals and per-vehicle money figures.
"""

from __future__ import annotations

from src.components.finance import (
    expense_total,
    sum_amounts,
    total_invested,
    vehicle_financials,
)
from src.domain.entities import Expense, SaleDetails, SoldVehicle, StockVehicle


def _stock(vehicle_id: str, price: float) -> StockVehicle:
    return StockVehicle(
        id=vehicle_id,
        brand_model="Bajaj CT 100",
        vehicle_number="KA09ZZ0001",
        purchase_date="2024-02-01",
        purchase_price=price,
        seller_name="Gowda",
    )


class TestTotals:
    """Test amount helpers."""

    def test_sum_amounts(self) -> None:
        expenses = [
            Expense(vehicle_id="a", amount=10.25, date="2024-01-01"),
            Expense(vehicle_id="b", amount=4.75, date="2024-01-02"),
        ]
        assert sum_amounts(expenses) == 15.0
        assert sum_amounts([]) == 0.0

    def test_missing_vehicle_reads_zero(self) -> None:
        assert expense_total({"a": 5.0}, "b") == 0.0

    def test_invested_empty_fleet(self) -> None:
        assert total_invested([], {}) == 0.0


class TestVehicleFinancials:
    """Test the per-vehicle summary."""

    def test_sold_without_price(self) -> None:
        base = _stock("x", 1000).model_dump(exclude={"status"})
        vehicle = SoldVehicle(**base, sale=SaleDetails(buyer_name="Kiran"))

        money = vehicle_financials(vehicle, {"x": 100.0})

        assert money.amount_released == 0.0
        assert money.sale_balance == 0.0
        assert money.profit == -1100.0

    def test_stock_without_expenses(self) -> None:
        money = vehicle_financials(_stock("y", 500), {})
        assert money.total_expenses == 0.0
        assert money.total_spent == 500
