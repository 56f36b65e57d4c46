"""
Stock component - Port interfaces.

The storage collaborator. Implementations own persistence and concurrency;
the analytics components only ever read the lists these return.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Expense, Vehicle


class VehicleRepoPort(Protocol):
    """Repository interface for vehicles."""

    def list_vehicles(self) -> list[Vehicle]:
        """List all vehicles, most recently created first."""
        ...

    def get(self, vehicle_id: str) -> Vehicle | None:
        """Get vehicle by id."""
        ...

    def save(self, vehicle: Vehicle) -> Vehicle:
        """Insert or replace a vehicle and return the stored record."""
        ...

    def delete(self, vehicle_id: str) -> None:
        """Delete vehicle."""
        ...


class ExpenseRepoPort(Protocol):
    """Repository interface for expenses."""

    def list_expenses(self) -> list[Expense]:
        """List all expenses, newest date first."""
        ...

    def get(self, expense_id: str) -> Expense | None:
        """Get expense by id."""
        ...

    def save(self, expense: Expense) -> Expense:
        """Insert or replace an expense and return the stored record."""
        ...

    def delete(self, expense_id: str) -> None:
        """Delete expense."""
        ...
