"""Report entry point tests over the in-memory fleet from conftest."""

import pytest

from src.components.dates import MonthKey
from src.components.filters import ExpenseWindow
from src.components.reports import (
    ExpenseReportQuery,
    InventoryQuery,
    SalesReportQuery,
    run_dashboard,
    run_expense_report,
    run_inventory,
    run_sales_report,
)


class TestDashboard:
    def test_stats_and_activity(self, vehicle_repo, expense_repo, frozen_time) -> None:
        result = run_dashboard(vehicle_repo, expense_repo, frozen_time)

        assert result.stats.total_vehicles == 3
        assert result.stats.current_stock == 2
        assert result.stats.available_count == 1
        assert result.stats.total_invested == 111700
        assert result.stats.total_profit == 12000

        activity = {b.month: (b.purchases, b.sales) for b in result.monthly_activity}
        assert list(activity) == [MonthKey(2024, m) for m in range(1, 7)]
        assert activity[MonthKey(2024, 1)] == (1, 0)
        assert activity[MonthKey(2024, 3)] == (0, 1)
        assert activity[MonthKey(2024, 6)] == (1, 0)


class TestInventory:
    def test_search_with_financials(self, vehicle_repo, expense_repo) -> None:
        result = run_inventory(InventoryQuery(search_term="honda"), vehicle_repo, expense_repo)

        assert result.total == 2
        assert [i.vehicle.id for i in result.items] == ["v3", "v1"]
        assert result.items[0].financials.total_expenses == 1200
        assert result.items[0].financials.profit is None
        assert result.items[1].financials.profit == 12000

    def test_status_filter(self, vehicle_repo, expense_repo) -> None:
        result = run_inventory(InventoryQuery(status="Available"), vehicle_repo, expense_repo)
        assert [i.vehicle.id for i in result.items] == ["v2"]


class TestSalesReport:
    def test_report(self, vehicle_repo, expense_repo, frozen_time) -> None:
        result = run_sales_report(SalesReportQuery(), vehicle_repo, expense_repo, frozen_time)

        assert [i.vehicle.id for i in result.items] == ["v1"]
        assert result.summary.sale_count == 1
        assert result.summary.total_profit == 12000
        assert len(result.monthly_sales) == 12
        assert result.peak_month == MonthKey(2024, 3)

    def test_summary_ignores_search(self, vehicle_repo, expense_repo, frozen_time) -> None:
        result = run_sales_report(
            SalesReportQuery(search_term="nobody"), vehicle_repo, expense_repo, frozen_time
        )
        assert result.items == ()
        assert result.summary.sale_count == 1

    def test_invalid_window(self, vehicle_repo, expense_repo, frozen_time) -> None:
        with pytest.raises(ValueError):
            run_sales_report(
                SalesReportQuery(window_months=0), vehicle_repo, expense_repo, frozen_time
            )


class TestExpenseReport:
    def test_month_window(self, vehicle_repo, expense_repo, frozen_time) -> None:
        query = ExpenseReportQuery(window=ExpenseWindow(mode="month"))
        result = run_expense_report(query, vehicle_repo, expense_repo, frozen_time)

        assert result.window_label == "This Month"
        assert [(g.vehicle.id, g.total) for g in result.groups] == [
            ("v3", 1200),
            ("v2", 500),
            ("v1", 0),
        ]
        # the orphaned expense dated this month is not counted
        assert result.total_amount == 1700

    def test_today_with_search(self, vehicle_repo, expense_repo, frozen_time) -> None:
        query = ExpenseReportQuery(window=ExpenseWindow(mode="today"), search_term="jupiter")
        result = run_expense_report(query, vehicle_repo, expense_repo, frozen_time)
        assert len(result.groups) == 1
        assert [e.amount for e in result.groups[0].expenses] == [500]
        assert result.total_amount == 500

    def test_all_time_newest_first(self, vehicle_repo, expense_repo, frozen_time) -> None:
        result = run_expense_report(ExpenseReportQuery(), vehicle_repo, expense_repo, frozen_time)
        activa = next(g for g in result.groups if g.vehicle.id == "v1")
        assert [e.date for e in activa.expenses] == ["2024-02-11", "2024-01-20"]
        assert result.total_amount == 4700
        assert result.window_label == "All Time"
