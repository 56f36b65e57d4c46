"""
Search component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Vehicle, VehicleStatus

# --- Input Models ---


@dataclass(frozen=True)
class SearchQuery:
    """Input for global search."""

    term: str = ""


# --- Output Models ---


@dataclass(frozen=True)
class SearchResult:
    """One global search hit, tagged with its status for grouping."""

    status: VehicleStatus
    vehicle: Vehicle
    route_hint: str = "/inventory"


@dataclass(frozen=True)
class SearchOutput:
    """Output for global search."""

    term: str
    results: tuple[SearchResult, ...]
    total: int
