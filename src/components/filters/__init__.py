"""
Filters component - Vehicle criteria and expense date windows.
"""

from ._impl import (
    expense_in_window,
    filter_expense_vehicles,
    filter_expenses_by_window,
    filter_sales,
    filter_vehicles,
    vehicle_passes,
)
from .models import (
    WINDOW_LABELS,
    WINDOW_MODES,
    ExpenseWindow,
    StatusFilter,
    VehicleFilter,
    WindowMode,
)

__all__ = [
    # Criteria
    "ExpenseWindow",
    "StatusFilter",
    "VehicleFilter",
    "WindowMode",
    "WINDOW_LABELS",
    "WINDOW_MODES",
    # Core
    "expense_in_window",
    "filter_expense_vehicles",
    "filter_expenses_by_window",
    "filter_sales",
    "filter_vehicles",
    "vehicle_passes",
]
