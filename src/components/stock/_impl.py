"""
Stock services - Vehicle and expense record keeping.

Handles purchases, sales, status changes and expenses through the storage
ports, returning validation errors instead of raising.

Key behaviors:
- New purchases always start as Available
- A vehicle leaving Sold loses every sale fact
- Partnership purchases require a partner name; non-partnership purchases
  never keep one
- Expenses need an existing vehicle, a positive amount and a valid date
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from src.components.dates import parse_local_date
from src.domain.entities import (
    VEHICLE_STATUSES,
    Expense,
    SaleDetails,
    SoldVehicle,
    StockVehicle,
    Vehicle,
    VehicleBase,
    new_id,
    parse_vehicle,
)

from .models import ExpenseInput, PurchaseInput, SaleInput, StockValidationError
from .ports import ExpenseRepoPort, VehicleRepoPort

logger = logging.getLogger(__name__)

_VEHICLE_FIELDS = frozenset(VehicleBase.model_fields) | {"status"}
_SALE_FIELDS = frozenset(SaleDetails.model_fields)

# --- Validation Functions ---


def _required(value: str | None, field: str, label: str) -> list[StockValidationError]:
    if value is None or not str(value).strip():
        return [
            StockValidationError(
                code=f"{field}_required",
                message=f"{label} is required",
                field=field,
            )
        ]
    return []


def _valid_date(value: str | None, field: str, label: str) -> list[StockValidationError]:
    if parse_local_date(value) is None:
        return [
            StockValidationError(
                code=f"{field}_invalid",
                message=f"{label} must be a date in YYYY-MM-DD form",
                field=field,
            )
        ]
    return []


def _optional_date(value: str | None, field: str, label: str) -> list[StockValidationError]:
    if value is None or not str(value).strip():
        return []
    return _valid_date(value, field, label)


def validate_purchase_data(data: dict[str, Any]) -> list[StockValidationError]:
    """Validate purchase facts of a vehicle record."""
    errors: list[StockValidationError] = []
    errors += _required(data.get("brand_model"), "brand_model", "Brand and model")
    errors += _required(data.get("vehicle_number"), "vehicle_number", "Vehicle number")
    errors += _required(data.get("seller_name"), "seller_name", "Seller name")
    errors += _required(data.get("seller_place"), "seller_place", "Seller place")
    errors += _valid_date(data.get("purchase_date"), "purchase_date", "Purchase date")

    price = data.get("purchase_price")
    if price is None or price < 0:
        errors.append(
            StockValidationError(
                code="purchase_price_invalid",
                message="Purchase price must be zero or more",
                field="purchase_price",
            )
        )

    if data.get("is_partnership") and not (data.get("partner_name") or "").strip():
        errors.append(
            StockValidationError(
                code="partner_name_required",
                message="Partner name is required for a partnership purchase",
                field="partner_name",
            )
        )

    return errors


def validate_sale_data(data: dict[str, Any]) -> list[StockValidationError]:
    """Validate the facts needed to record a sale."""
    errors: list[StockValidationError] = []
    errors += _required(data.get("buyer_name"), "buyer_name", "Buyer name")
    errors += _valid_date(data.get("sale_date"), "sale_date", "Sale date")
    errors += _optional_date(
        data.get("finance_credited_date"), "finance_credited_date", "Finance credited date"
    )

    price = data.get("selling_price")
    if price is None or price < 0:
        errors.append(
            StockValidationError(
                code="selling_price_invalid",
                message="Selling price must be zero or more",
                field="selling_price",
            )
        )
    return errors


def validate_expense_data(amount: float | None, date: str | None) -> list[StockValidationError]:
    """Validate expense amount and date."""
    errors: list[StockValidationError] = []
    if amount is None or amount <= 0:
        errors.append(
            StockValidationError(
                code="amount_invalid",
                message="Amount must be greater than zero",
                field="amount",
            )
        )
    errors += _valid_date(date, "date", "Expense date")
    return errors


def _strip(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _positive_or_none(value: float | None) -> float | None:
    return value if value else None


# --- In-Memory Repositories ---


class InMemoryVehicleRepo:
    """In-memory vehicle repository for testing/dev."""

    def __init__(self, vehicles: list[Vehicle] | None = None) -> None:
        self._vehicles: dict[str, Vehicle] = {}
        for vehicle in vehicles or []:
            self._vehicles[vehicle.id] = vehicle

    def list_vehicles(self) -> list[Vehicle]:
        # Newest created first, like the SQLite adapter
        return list(reversed(self._vehicles.values()))

    def get(self, vehicle_id: str) -> Vehicle | None:
        return self._vehicles.get(vehicle_id)

    def save(self, vehicle: Vehicle) -> Vehicle:
        self._vehicles[vehicle.id] = vehicle
        return vehicle

    def delete(self, vehicle_id: str) -> None:
        self._vehicles.pop(vehicle_id, None)


class InMemoryExpenseRepo:
    """In-memory expense repository for testing/dev."""

    def __init__(self, expenses: list[Expense] | None = None) -> None:
        self._expenses: dict[str, Expense] = {e.id: e for e in expenses or []}

    def list_expenses(self) -> list[Expense]:
        return sorted(self._expenses.values(), key=lambda e: e.date, reverse=True)

    def get(self, expense_id: str) -> Expense | None:
        return self._expenses.get(expense_id)

    def save(self, expense: Expense) -> Expense:
        self._expenses[expense.id] = expense
        return expense

    def delete(self, expense_id: str) -> None:
        self._expenses.pop(expense_id, None)


# --- Vehicle Service ---


class VehicleService:
    """
    Vehicle service.

    Records purchases and sales and keeps sale facts consistent with status.
    """

    def __init__(self, repo: VehicleRepoPort) -> None:
        """Initialize service."""
        self._repo = repo

    def list_vehicles(self) -> list[Vehicle]:
        return self._repo.list_vehicles()

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        return self._repo.get(vehicle_id)

    def record_purchase(
        self, purchase: PurchaseInput
    ) -> tuple[Vehicle | None, list[StockValidationError]]:
        """
        Record a purchased vehicle as Available stock.

        Returns:
            Tuple of (vehicle, errors). Vehicle is None if validation fails.
        """
        data: dict[str, Any] = {
            "brand_model": purchase.brand_model.strip(),
            "vehicle_number": purchase.vehicle_number.strip(),
            "purchase_date": purchase.purchase_date.strip(),
            "purchase_price": purchase.purchase_price,
            "seller_name": purchase.seller_name.strip(),
            "seller_contact": purchase.seller_contact.strip(),
            "seller_place": purchase.seller_place.strip(),
            "seller_address": _strip(purchase.seller_address),
            "purchase_bill": _strip(purchase.purchase_bill),
            "purchase_balance": _positive_or_none(purchase.purchase_balance),
            "is_partnership": purchase.is_partnership,
            "partner_name": _strip(purchase.partner_name) if purchase.is_partnership else None,
            "notes": _strip(purchase.notes),
        }

        errors = validate_purchase_data(data)
        if errors:
            logger.warning("Rejected purchase of %s: %s", data["vehicle_number"], errors)
            return None, errors

        vehicle = StockVehicle(id=new_id(), status="Available", **data)
        saved = self._repo.save(vehicle)
        logger.info("Recorded purchase %s (%s)", saved.id, saved.vehicle_number)
        return saved, []

    def record_sale(
        self, vehicle_id: str, sale: SaleInput
    ) -> tuple[Vehicle | None, list[StockValidationError]]:
        """Mark a vehicle Sold with the given sale facts."""
        current = self._repo.get(vehicle_id)
        if current is None:
            return None, [_not_found("vehicle", vehicle_id)]

        if current.status == "Sold":
            return None, [
                StockValidationError(
                    code="already_sold",
                    message=f"Vehicle {current.vehicle_number} is already sold",
                    field="status",
                )
            ]

        sale_data: dict[str, Any] = {
            "sale_date": sale.sale_date.strip(),
            "selling_price": sale.selling_price,
            "buyer_name": sale.buyer_name.strip(),
            "buyer_contact": _strip(sale.buyer_contact),
            "buyer_place": _strip(sale.buyer_place),
            "buyer_address": _strip(sale.buyer_address),
            "sale_bill": _strip(sale.sale_bill),
            "sale_balance": _positive_or_none(sale.sale_balance),
            "financier_name": _strip(sale.financier_name),
            "financier_amount": _positive_or_none(sale.financier_amount),
            "finance_credited_date": _strip(sale.finance_credited_date),
        }

        errors = validate_sale_data(sale_data)
        if errors:
            logger.warning("Rejected sale of %s: %s", vehicle_id, errors)
            return None, errors

        base = current.model_dump(exclude={"status"})
        sold = SoldVehicle(**base, sale=SaleDetails(**sale_data))
        saved = self._repo.save(sold)
        logger.info("Recorded sale of %s", saved.id)
        return saved, []

    def update_vehicle(
        self, vehicle_id: str, updates: dict[str, Any]
    ) -> tuple[Vehicle | None, list[StockValidationError]]:
        """
        Apply field updates, sale fields included, to a vehicle.

        A status other than Sold clears every sale fact, whatever the
        updates contain.
        """
        current = self._repo.get(vehicle_id)
        if current is None:
            return None, [_not_found("vehicle", vehicle_id)]

        data = current.model_dump()
        sale_data: dict[str, Any] = dict(data.pop("sale", None) or {})

        errors: list[StockValidationError] = []
        for key, value in updates.items():
            if key == "id":
                continue
            if key in _SALE_FIELDS:
                sale_data[key] = _strip(value) if isinstance(value, str) else value
            elif key in _VEHICLE_FIELDS:
                data[key] = value.strip() if isinstance(value, str) else value
            else:
                errors.append(
                    StockValidationError(
                        code="unknown_field",
                        message=f"Unknown vehicle field: {key}",
                        field=key,
                    )
                )

        if data.get("status") not in VEHICLE_STATUSES:
            errors.append(
                StockValidationError(
                    code="status_invalid",
                    message=f"Status must be one of {', '.join(VEHICLE_STATUSES)}",
                    field="status",
                )
            )

        if data.get("status") == "Sold":
            # Blank sale fields stay allowed while editing
            errors += _optional_date(sale_data.get("sale_date"), "sale_date", "Sale date")
            errors += _optional_date(
                sale_data.get("finance_credited_date"),
                "finance_credited_date",
                "Finance credited date",
            )

        errors += validate_purchase_data(data)
        if errors:
            logger.warning("Rejected update of %s: %s", vehicle_id, errors)
            return None, errors

        if not data.get("is_partnership"):
            data["partner_name"] = None
        data["purchase_balance"] = _positive_or_none(data.get("purchase_balance"))
        for key in ("sale_balance", "financier_amount"):
            sale_data[key] = _positive_or_none(sale_data.get(key))
        if data["status"] == "Sold":
            data["sale"] = sale_data

        try:
            vehicle = parse_vehicle(data)
        except ValidationError as e:
            return None, [
                StockValidationError(code="vehicle_invalid", message=str(e), field=None)
            ]

        saved = self._repo.save(vehicle)
        logger.info("Updated vehicle %s (status %s)", saved.id, saved.status)
        return saved, []

    def send_to_workshop(
        self, vehicle_id: str
    ) -> tuple[Vehicle | None, list[StockValidationError]]:
        """Move unsold stock to the workshop."""
        current = self._repo.get(vehicle_id)
        if current is None:
            return None, [_not_found("vehicle", vehicle_id)]
        if current.status == "Sold":
            return None, [
                StockValidationError(
                    code="already_sold",
                    message="A sold vehicle cannot go to the workshop",
                    field="status",
                )
            ]
        return self.update_vehicle(vehicle_id, {"status": "Workshop"})

    def delete(self, vehicle_id: str) -> tuple[bool, list[StockValidationError]]:
        """Delete a vehicle. Its expenses stay in storage as orphans."""
        if self._repo.get(vehicle_id) is None:
            return False, [_not_found("vehicle", vehicle_id)]
        self._repo.delete(vehicle_id)
        logger.info("Deleted vehicle %s", vehicle_id)
        return True, []


# --- Expense Service ---


class ExpenseService:
    """Expense service. Expenses always belong to an existing vehicle."""

    def __init__(self, repo: ExpenseRepoPort, vehicles: VehicleRepoPort) -> None:
        """Initialize service."""
        self._repo = repo
        self._vehicles = vehicles

    def list_expenses(self) -> list[Expense]:
        return self._repo.list_expenses()

    def add_expense(
        self, expense: ExpenseInput
    ) -> tuple[Expense | None, list[StockValidationError]]:
        """Record an expense against a vehicle."""
        errors: list[StockValidationError] = []
        if self._vehicles.get(expense.vehicle_id) is None:
            errors.append(_not_found("vehicle", expense.vehicle_id, field="vehicle_id"))
        errors += validate_expense_data(expense.amount, expense.date)
        if errors:
            logger.warning("Rejected expense for %s: %s", expense.vehicle_id, errors)
            return None, errors

        record = Expense(
            id=new_id(),
            vehicle_id=expense.vehicle_id,
            amount=expense.amount,
            date=expense.date.strip(),
            description=_strip(expense.description),
        )
        saved = self._repo.save(record)
        logger.info("Recorded expense %s for vehicle %s", saved.id, saved.vehicle_id)
        return saved, []

    def update_expense(
        self, expense_id: str, expense: ExpenseInput
    ) -> tuple[Expense | None, list[StockValidationError]]:
        """Edit amount, date or description. The vehicle cannot change."""
        current = self._repo.get(expense_id)
        if current is None:
            return None, [_not_found("expense", expense_id)]

        errors: list[StockValidationError] = []
        if expense.vehicle_id != current.vehicle_id:
            errors.append(
                StockValidationError(
                    code="vehicle_id_immutable",
                    message="An expense cannot be moved to another vehicle",
                    field="vehicle_id",
                )
            )
        errors += validate_expense_data(expense.amount, expense.date)
        if errors:
            return None, errors

        updated = current.model_copy(
            update={
                "amount": expense.amount,
                "date": expense.date.strip(),
                "description": _strip(expense.description),
            }
        )
        saved = self._repo.save(updated)
        logger.info("Updated expense %s", saved.id)
        return saved, []

    def delete_expense(self, expense_id: str) -> tuple[bool, list[StockValidationError]]:
        if self._repo.get(expense_id) is None:
            return False, [_not_found("expense", expense_id)]
        self._repo.delete(expense_id)
        return True, []


def _not_found(kind: str, record_id: str, field: str | None = None) -> StockValidationError:
    return StockValidationError(
        code=f"{kind}_not_found",
        message=f"{kind.capitalize()} with ID {record_id} not found",
        field=field,
    )
