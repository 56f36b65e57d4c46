"""Properties that must keep holding across refactors of the analytics core."""

from datetime import timedelta

import pytest

from src.components.filters import (
    ExpenseWindow,
    VehicleFilter,
    filter_expenses_by_window,
    filter_vehicles,
)
from src.components.finance import expenses_by_vehicle, fleet_stats, profit, total_invested
from src.components.search import matches
from src.components.timeseries import build_monthly_series
from tests.factories import TODAY, make_expense, make_sold, make_stock


@pytest.fixture
def mixed_fleet():
    return [
        make_stock(id="a", purchase_price=40000),
        make_stock(id="b", purchase_price=15000, status="Pending"),
        make_stock(id="c", purchase_price=22000, status="Workshop"),
        make_sold(id="d", purchase_price=50000, sale={"selling_price": 65000}),
        make_sold(id="e", purchase_price=30000, sale={"selling_price": 25000}),
    ]


@pytest.fixture
def mixed_expenses():
    return [
        make_expense("a", 1000, "2024-05-01"),
        make_expense("c", 250, "2024-05-03"),
        make_expense("d", 3000, "2024-02-01"),
        make_expense("e", 400, "2024-03-01"),
    ]


def test_invested_excludes_every_sold_vehicle(mixed_fleet, mixed_expenses):
    totals = expenses_by_vehicle(mixed_expenses)
    expected = sum(
        v.purchase_price + totals.get(v.id, 0) for v in mixed_fleet if v.status != "Sold"
    )
    assert total_invested(mixed_fleet, totals) == expected == 78250


def test_profit_is_selling_minus_purchase_minus_expenses(mixed_fleet, mixed_expenses):
    totals = expenses_by_vehicle(mixed_expenses)
    by_id = {v.id: v for v in mixed_fleet}
    assert profit(by_id["d"], totals) == 12000
    assert profit(by_id["e"], totals) == -5400


def test_empty_series_and_current_month_bucket(mixed_fleet):
    assert build_monthly_series([], today=TODAY) == ()
    series = build_monthly_series(mixed_fleet, today=TODAY)
    assert series[-1].month.first_day == TODAY.replace(day=1)


def test_noop_filter_is_identity(mixed_fleet):
    assert filter_vehicles(mixed_fleet, VehicleFilter()) == mixed_fleet


def test_today_window_includes_today_only():
    today_expense = make_expense("a", 1, TODAY.isoformat())
    yesterday_expense = make_expense("a", 1, (TODAY - timedelta(days=1)).isoformat())
    result = filter_expenses_by_window(
        [today_expense, yesterday_expense], ExpenseWindow(mode="today"), today=TODAY
    )
    assert result == [today_expense]


def test_single_sold_vehicle_example():
    vehicle = make_sold(id="v1", purchase_price=50000, sale={"selling_price": 65000})
    expenses = [make_expense("v1", 3000, "2024-02-01")]
    stats = fleet_stats([vehicle], expenses)
    assert stats.total_profit == 12000
    assert stats.total_invested == 0


def test_search_matches_model_and_seller():
    assert matches(make_stock(brand_model="Honda Activa"), "honda")
    assert matches(make_stock(seller_name="Honda Lane Motors"), "honda")


def test_custom_range_bounds():
    window = ExpenseWindow(mode="custom", start="2024-01-10", end="2024-01-20")
    inside = make_expense("a", 1, "2024-01-15")
    outside = make_expense("a", 1, "2024-01-21")
    assert filter_expenses_by_window([inside, outside], window, today=TODAY) == [inside]
