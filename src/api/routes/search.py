"""Global search route."""

from fastapi import APIRouter, Depends, Query

from src.api.deps import get_vehicle_repo
from src.api.schemas import SearchResponse, search_result_model
from src.components.search import SearchQuery, group_results_by_status, run_search
from src.components.stock import VehicleRepoPort

router = APIRouter()


@router.get("", response_model=SearchResponse)
def search(
    q: str = Query(""),
    vehicles: VehicleRepoPort = Depends(get_vehicle_repo),
) -> SearchResponse:
    result = run_search(SearchQuery(term=q), vehicles)
    grouped = group_results_by_status(result.results)
    return SearchResponse(
        term=result.term,
        results=[search_result_model(r) for r in result.results],
        total=result.total,
        counts_by_status={status: len(items) for status, items in grouped.items()},
    )
