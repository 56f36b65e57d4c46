"""
Free-text vehicle search.

Functional Core - pure business logic.

Key behaviors:
- Term is trimmed and lower-cased; an empty term matches everything
- Case-insensitive substring match, OR across a fixed field list
- A missing field is a non-match for that field only
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from src.domain.entities import Vehicle, VehicleStatus

from .models import SearchResult

# --- Field Lists ---

VEHICLE_SEARCH_FIELDS: tuple[str, ...] = (
    "brand_model",
    "vehicle_number",
    "seller_name",
    "buyer_name",
    "status",
)

# Sales report searches the buyer, not the seller
SALES_SEARCH_FIELDS: tuple[str, ...] = ("brand_model", "vehicle_number", "buyer_name")

EXPENSE_SEARCH_FIELDS: tuple[str, ...] = ("brand_model", "vehicle_number")

_SALE_FIELDS = frozenset({"buyer_name"})


def normalize_term(term: str | None) -> str:
    """Lower-case and trim a search term."""
    return (term or "").strip().lower()


def field_value(vehicle: Vehicle, field_name: str) -> str | None:
    """Read a searchable field; sale fields resolve through the sale facts."""
    if field_name in _SALE_FIELDS:
        sale = vehicle.sale_facts
        return getattr(sale, field_name) if sale is not None else None

    value = getattr(vehicle, field_name, None)
    return value if isinstance(value, str) else None


def matches(
    vehicle: Vehicle,
    term: str | None,
    fields: Sequence[str] = VEHICLE_SEARCH_FIELDS,
) -> bool:
    """True if the normalized term is a substring of any listed field."""
    needle = normalize_term(term)
    if not needle:
        return True

    for name in fields:
        value = field_value(vehicle, name)
        if value and needle in value.lower():
            return True
    return False


def filter_vehicles_by_search(
    vehicles: Iterable[Vehicle],
    term: str | None,
    fields: Sequence[str] = VEHICLE_SEARCH_FIELDS,
) -> list[Vehicle]:
    """Vehicles matching the term, input order preserved."""
    needle = normalize_term(term)
    return [v for v in vehicles if matches(v, needle, fields)]


def search_vehicles(
    vehicles: Iterable[Vehicle],
    term: str | None,
    route_hint: str = "/inventory",
) -> tuple[SearchResult, ...]:
    """
    Global search across the whole fleet.

    A blank term yields no results; the global results view only exists
    while something is typed.
    """
    if not normalize_term(term):
        return ()

    return tuple(
        SearchResult(status=v.status, vehicle=v, route_hint=route_hint)
        for v in filter_vehicles_by_search(vehicles, term)
    )


def group_results_by_status(
    results: Iterable[SearchResult],
) -> dict[VehicleStatus, tuple[SearchResult, ...]]:
    """Group search results by vehicle status, preserving result order."""
    grouped: dict[VehicleStatus, list[SearchResult]] = {}
    for result in results:
        grouped.setdefault(result.status, []).append(result)
    return {status: tuple(items) for status, items in grouped.items()}
