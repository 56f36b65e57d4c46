"""
Finance component - Financial roll-up models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardStats:
    """Fleet-wide figures for the dashboard."""

    total_vehicles: int
    current_stock: int
    available_count: int
    total_invested: float
    total_profit: float


@dataclass(frozen=True)
class VehicleFinancials:
    """Per-vehicle money summary. Sale-side figures are None for unsold stock."""

    purchase_price: float
    purchase_balance: float
    total_expenses: float
    total_spent: float
    amount_released: float | None = None
    sale_balance: float | None = None
    profit: float | None = None


@dataclass(frozen=True)
class SalesSummary:
    """Sales report header figures."""

    sale_count: int
    total_profit: float
