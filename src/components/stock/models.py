"""
Stock component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Validation Errors ---


@dataclass(frozen=True)
class StockValidationError:
    """Stock record validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class PurchaseInput:
    """Input for recording a newly purchased vehicle."""

    brand_model: str
    vehicle_number: str
    purchase_date: str
    purchase_price: float
    seller_name: str
    seller_place: str
    seller_contact: str = ""
    seller_address: str | None = None
    purchase_bill: str | None = None
    purchase_balance: float | None = None
    is_partnership: bool = False
    partner_name: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class SaleInput:
    """Input for selling a vehicle."""

    sale_date: str
    selling_price: float
    buyer_name: str
    buyer_contact: str = ""
    buyer_place: str = ""
    buyer_address: str | None = None
    sale_bill: str | None = None
    sale_balance: float | None = None
    financier_name: str | None = None
    financier_amount: float | None = None
    finance_credited_date: str | None = None


@dataclass(frozen=True)
class ExpenseInput:
    """Input for adding or editing an expense."""

    vehicle_id: str
    amount: float
    date: str
    description: str | None = None
