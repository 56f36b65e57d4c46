"""
Search component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Vehicle


class VehicleSourcePort(Protocol):
    """Read access to the current vehicle snapshot."""

    def list_vehicles(self) -> list[Vehicle]:
        """List all vehicles."""
        ...
