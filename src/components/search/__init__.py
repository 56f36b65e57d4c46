"""
Search component - Free-text vehicle search and global results.
"""

from ._impl import (
    EXPENSE_SEARCH_FIELDS,
    SALES_SEARCH_FIELDS,
    VEHICLE_SEARCH_FIELDS,
    field_value,
    filter_vehicles_by_search,
    group_results_by_status,
    matches,
    normalize_term,
    search_vehicles,
)
from .component import run_search
from .models import SearchOutput, SearchQuery, SearchResult
from .ports import VehicleSourcePort

__all__ = [
    # Entry points
    "run_search",
    # Models
    "SearchQuery",
    "SearchResult",
    "SearchOutput",
    # Ports
    "VehicleSourcePort",
    # Core
    "EXPENSE_SEARCH_FIELDS",
    "SALES_SEARCH_FIELDS",
    "VEHICLE_SEARCH_FIELDS",
    "field_value",
    "filter_vehicles_by_search",
    "group_results_by_status",
    "matches",
    "normalize_term",
    "search_vehicles",
]
