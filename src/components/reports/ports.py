"""
Reports component - Port interfaces.

Reports only read; every call takes a fresh snapshot from the sources.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from src.domain.entities import Expense, Vehicle


class VehicleSourcePort(Protocol):
    """Read access to the vehicle store."""

    def list_vehicles(self) -> list[Vehicle]:
        """List all vehicles."""
        ...


class ExpenseSourcePort(Protocol):
    """Read access to the expense store."""

    def list_expenses(self) -> list[Expense]:
        """List all expenses."""
        ...


class TimePort(Protocol):
    """Time provider interface."""

    def today(self) -> date:
        """Get the current calendar date in the dealership's timezone."""
        ...
