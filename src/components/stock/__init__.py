"""
Stock component - Vehicle and expense records via the storage ports.
"""

from ._impl import (
    ExpenseService,
    InMemoryExpenseRepo,
    InMemoryVehicleRepo,
    VehicleService,
    validate_expense_data,
    validate_purchase_data,
    validate_sale_data,
)
from .models import ExpenseInput, PurchaseInput, SaleInput, StockValidationError
from .ports import ExpenseRepoPort, VehicleRepoPort

__all__ = [
    # Services
    "ExpenseService",
    "VehicleService",
    # In-memory adapters
    "InMemoryExpenseRepo",
    "InMemoryVehicleRepo",
    # Input models
    "ExpenseInput",
    "PurchaseInput",
    "SaleInput",
    "StockValidationError",
    # Ports
    "ExpenseRepoPort",
    "VehicleRepoPort",
    # Validation
    "validate_expense_data",
    "validate_purchase_data",
    "validate_sale_data",
]
