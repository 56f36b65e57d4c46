"""Inventory route: filtered vehicles with their money summaries."""

from typing import Literal

from fastapi import APIRouter, Depends, Query

from src.api.deps import get_expense_repo, get_vehicle_repo
from src.api.schemas import InventoryResponse, item_model
from src.components.reports import InventoryQuery, run_inventory
from src.components.stock import ExpenseRepoPort, VehicleRepoPort

router = APIRouter()

StatusParam = Literal["All", "Available", "Pending", "Workshop", "Sold"]


@router.get("", response_model=InventoryResponse)
def list_inventory(
    status: StatusParam = Query("All"),
    q: str = Query("", description="Search term"),
    date: str = Query("", description="Exact purchase or sale date, YYYY-MM-DD"),
    vehicles: VehicleRepoPort = Depends(get_vehicle_repo),
    expenses: ExpenseRepoPort = Depends(get_expense_repo),
) -> InventoryResponse:
    result = run_inventory(
        InventoryQuery(status=status, search_term=q, exact_date=date),
        vehicles,
        expenses,
    )
    return InventoryResponse(items=[item_model(i) for i in result.items], total=result.total)
