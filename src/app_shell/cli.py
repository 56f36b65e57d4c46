import argparse
import logging
import sys
from pathlib import Path

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteExpenseRepo, SQLiteVehicleRepo
from src.adapters.time_local import create_time_adapter
from src.api.deps import Settings
from src.app_shell.config import validate_ops_rules
from src.app_shell.filter_state import ExpenseFilterState
from src.app_shell.format import format_currency
from src.components.reports import (
    ExpenseReportQuery,
    SalesReportQuery,
    run_dashboard,
    run_expense_report,
    run_sales_report,
)
from src.components.search import SearchQuery, group_results_by_status, run_search
from src.rules.loader import load_rules
from src.rules.models import DealerRules

logger = logging.getLogger("cli")


def get_rules(settings: Settings) -> DealerRules:
    if not Path(settings.rules_path).exists():
        logger.error("Rules file %s not found.", settings.rules_path)
        sys.exit(1)
    try:
        return load_rules(settings.rules_path)
    except ValueError as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)


def handle_migrate(settings: Settings, rules: DealerRules, args: argparse.Namespace) -> None:
    applied = SQLiteMigrator(settings.db_path).run_migrations()
    print(f"Applied {len(applied)} migrations to {settings.db_path}.")


def handle_dashboard(settings: Settings, rules: DealerRules, args: argparse.Namespace) -> None:
    money = rules.currency
    result = run_dashboard(
        SQLiteVehicleRepo(settings.db_path),
        SQLiteExpenseRepo(settings.db_path),
        create_time_adapter(rules.analytics.timezone),
    )
    stats = result.stats
    print(f"Total vehicles:  {stats.total_vehicles}")
    print(f"Current stock:   {stats.current_stock} ({stats.available_count} available)")
    print(f"Total invested:  {format_currency(stats.total_invested, money)}")
    print(f"Total profit:    {format_currency(stats.total_profit, money)}")
    if result.monthly_activity:
        print()
        print(f"{'Month':<8}{'Bought':>8}{'Sold':>8}")
        for bucket in result.monthly_activity:
            print(f"{bucket.label:<8}{bucket.purchases:>8}{bucket.sales:>8}")


def handle_search(settings: Settings, rules: DealerRules, args: argparse.Namespace) -> None:
    result = run_search(SearchQuery(term=args.term), SQLiteVehicleRepo(settings.db_path))
    if not result.total:
        print(f"No vehicles match '{args.term}'.")
        return
    for status, hits in group_results_by_status(result.results).items():
        print(f"{status} ({len(hits)})")
        for hit in hits:
            print(f"  {hit.vehicle.vehicle_number:<14}{hit.vehicle.brand_model}")


def handle_sales(settings: Settings, rules: DealerRules, args: argparse.Namespace) -> None:
    money = rules.currency
    result = run_sales_report(
        SalesReportQuery(
            search_term=args.q,
            window_months=rules.analytics.sales_window_months,
        ),
        SQLiteVehicleRepo(settings.db_path),
        SQLiteExpenseRepo(settings.db_path),
        create_time_adapter(rules.analytics.timezone),
    )
    print(f"Sales: {result.summary.sale_count}")
    print(f"Total profit: {format_currency(result.summary.total_profit, money)}")
    if result.peak_month:
        print(f"Best month: {result.peak_month.label}")
    for item in result.items:
        sale = item.vehicle.sale_facts
        sold_on = sale.sale_date if sale else None
        print(
            f"  {sold_on or '-':<12}{item.vehicle.vehicle_number:<14}"
            f"{item.vehicle.brand_model:<24}{format_currency(item.financials.profit, money):>14}"
        )


def handle_expenses(settings: Settings, rules: DealerRules, args: argparse.Namespace) -> None:
    money = rules.currency
    try:
        state = ExpenseFilterState.from_params(args.mode, args.start, args.end)
    except ValueError as e:
        logger.error("%s", e)
        sys.exit(2)

    result = run_expense_report(
        ExpenseReportQuery(window=state.criteria(), search_term=args.q),
        SQLiteVehicleRepo(settings.db_path),
        SQLiteExpenseRepo(settings.db_path),
        create_time_adapter(rules.analytics.timezone),
        week_starts_on=rules.analytics.week_starts_on,
    )
    print(f"{result.window_label}: {format_currency(result.total_amount, money)}")
    for group in result.groups:
        print(f"{group.vehicle.vehicle_number} {group.vehicle.brand_model}")
        for expense in group.expenses:
            print(
                f"  {expense.date:<12}{format_currency(expense.amount, money):>12}"
                f"  {expense.description or ''}"
            )


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Dealer Desk CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    subparsers.add_parser("migrate", help="Apply pending database migrations")

    # dashboard
    subparsers.add_parser("dashboard", help="Show fleet figures and monthly activity")

    # search
    search_parser = subparsers.add_parser("search", help="Search vehicles")
    search_parser.add_argument("term", help="Text to look for")

    # sales
    sales_parser = subparsers.add_parser("sales", help="Show the sales report")
    sales_parser.add_argument("--q", default="", help="Search over model, number and buyer")

    # expenses
    expenses_parser = subparsers.add_parser("expenses", help="Show expenses in a window")
    expenses_parser.add_argument(
        "--mode", default="all", choices=["all", "today", "week", "month", "custom"]
    )
    expenses_parser.add_argument("--start", default="", help="Range start, YYYY-MM-DD")
    expenses_parser.add_argument("--end", default="", help="Range end, YYYY-MM-DD")
    expenses_parser.add_argument("--q", default="", help="Search over model and number")

    args = parser.parse_args()

    settings = Settings()
    rules = get_rules(settings)
    validate_ops_rules(rules, settings.data_dir)
    if args.command != "migrate":
        # Reports on a fresh data dir read empty tables
        SQLiteMigrator(settings.db_path).run_migrations()

    handlers = {
        "migrate": handle_migrate,
        "dashboard": handle_dashboard,
        "search": handle_search,
        "sales": handle_sales,
        "expenses": handle_expenses,
    }
    handlers[args.command](settings, rules, args)


if __name__ == "__main__":
    main()
