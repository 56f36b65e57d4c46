"""Vehicle and expense entity tests."""

import pytest
from pydantic import ValidationError

from src.domain.entities import Expense, SoldVehicle, StockVehicle, parse_vehicle


def base() -> dict:
    return {
        "brand_model": "Honda Activa",
        "vehicle_number": "KA01AB1234",
        "purchase_date": "2024-01-10",
        "purchase_price": 50000,
        "seller_name": "Ravi",
    }


class TestParseVehicle:
    def test_defaults_to_available_stock(self) -> None:
        vehicle = parse_vehicle(base())
        assert isinstance(vehicle, StockVehicle)
        assert vehicle.status == "Available"
        assert vehicle.sale_facts is None

    def test_stock_drops_sale_data(self) -> None:
        vehicle = parse_vehicle({**base(), "status": "Pending", "sale": {"buyer_name": "X"}})
        assert isinstance(vehicle, StockVehicle)
        assert vehicle.sale_facts is None

    def test_sold_carries_sale(self) -> None:
        vehicle = parse_vehicle({**base(), "status": "Sold", "sale": {"selling_price": 65000}})
        assert isinstance(vehicle, SoldVehicle)
        assert vehicle.sale_facts is not None
        assert vehicle.sale_facts.selling_price == 65000

    def test_unknown_status(self) -> None:
        with pytest.raises(ValidationError):
            parse_vehicle({**base(), "status": "Stolen"})

    def test_negative_purchase_price(self) -> None:
        with pytest.raises(ValidationError):
            parse_vehicle({**base(), "purchase_price": -1})

    def test_ids_are_unique(self) -> None:
        assert parse_vehicle(base()).id != parse_vehicle(base()).id


class TestExpense:
    def test_amount_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Expense(vehicle_id="v", amount=0, date="2024-01-01")

    def test_frozen(self) -> None:
        expense = Expense(vehicle_id="v", amount=1, date="2024-01-01")
        with pytest.raises(ValidationError):
            expense.amount = 2  # type: ignore[misc]
