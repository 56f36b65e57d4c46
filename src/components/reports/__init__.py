"""
Reports component - Dashboard, inventory, sales and expense views.
"""

from .component import (
    run_dashboard,
    run_expense_report,
    run_inventory,
    run_sales_report,
)
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

__all__ = [
    # Entry points
    "run_dashboard",
    "run_expense_report",
    "run_inventory",
    "run_sales_report",
    # Models
    "DashboardOutput",
    "ExpenseReportOutput",
    "ExpenseReportQuery",
    "InventoryItem",
    "InventoryOutput",
    "InventoryQuery",
    "SalesReportOutput",
    "SalesReportQuery",
    "VehicleExpenseGroup",
    # Ports
    "ExpenseSourcePort",
    "TimePort",
    "VehicleSourcePort",
]
