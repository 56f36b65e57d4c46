"""
Search component - Global vehicle search.

Shell Layer - reads the vehicle snapshot and delegates to the core.
"""

from __future__ import annotations

from ._impl import normalize_term, search_vehicles
from .models import SearchOutput, SearchQuery
from .ports import VehicleSourcePort


def run_search(input_data: SearchQuery, vehicles: VehicleSourcePort) -> SearchOutput:
    """Search every vehicle in storage."""
    term = normalize_term(input_data.term)
    if not term:
        return SearchOutput(term="", results=(), total=0)

    results = search_vehicles(vehicles.list_vehicles(), term)
    return SearchOutput(term=term, results=results, total=len(results))
