"""
Finance component - Investment, profit and fleet statistics.
"""

from ._impl import (
    expense_total,
    expenses_by_vehicle,
    fleet_stats,
    profit,
    sales_summary,
    sum_amounts,
    total_invested,
    vehicle_financials,
)
from .models import DashboardStats, SalesSummary, VehicleFinancials

__all__ = [
    # Models
    "DashboardStats",
    "SalesSummary",
    "VehicleFinancials",
    # Core
    "expense_total",
    "expenses_by_vehicle",
    "fleet_stats",
    "profit",
    "sales_summary",
    "sum_amounts",
    "total_invested",
    "vehicle_financials",
]
