from datetime import date

import pytest

from src.adapters.time_local import FrozenTimeAdapter
from src.components.stock import InMemoryExpenseRepo, InMemoryVehicleRepo
from src.domain.entities import Expense, SoldVehicle, StockVehicle
from tests.factories import TODAY, make_expense, make_sold, make_stock


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def frozen_time() -> FrozenTimeAdapter:
    """Time adapter frozen on TODAY."""
    return FrozenTimeAdapter.on(TODAY)


@pytest.fixture
def sold_activa() -> SoldVehicle:
    return make_sold(id="v1")


@pytest.fixture
def jupiter() -> StockVehicle:
    return make_stock(id="v2")


@pytest.fixture
def pulsar() -> StockVehicle:
    return make_stock(
        id="v3",
        brand_model="Bajaj Pulsar",
        vehicle_number="KA05MN4321",
        purchase_date="2024-06-01",
        purchase_price=70000,
        seller_name="Honda Lane Motors",
        status="Workshop",
    )


@pytest.fixture
def fleet_expenses() -> list[Expense]:
    return [
        make_expense("v1", 2000, "2024-01-20", description="Tyres"),
        make_expense("v1", 1000, "2024-02-11"),
        make_expense("v2", 500, "2024-06-15", description="Wash"),
        make_expense("v3", 1200, "2024-06-10"),
        make_expense("gone", 9999, "2024-06-14"),
    ]


@pytest.fixture
def vehicle_repo(sold_activa, jupiter, pulsar) -> InMemoryVehicleRepo:
    return InMemoryVehicleRepo([sold_activa, jupiter, pulsar])


@pytest.fixture
def expense_repo(fleet_expenses) -> InMemoryExpenseRepo:
    return InMemoryExpenseRepo(fleet_expenses)
