"""Dashboard route: fleet figures and monthly activity."""

from fastapi import APIRouter, Depends

from src.adapters.time_local import LocalTimeAdapter
from src.api.deps import get_expense_repo, get_time_adapter, get_vehicle_repo
from src.api.schemas import DashboardResponse, activity_model, stats_model
from src.components.reports import run_dashboard
from src.components.stock import ExpenseRepoPort, VehicleRepoPort

router = APIRouter()


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    vehicles: VehicleRepoPort = Depends(get_vehicle_repo),
    expenses: ExpenseRepoPort = Depends(get_expense_repo),
    time: LocalTimeAdapter = Depends(get_time_adapter),
) -> DashboardResponse:
    result = run_dashboard(vehicles, expenses, time)
    return DashboardResponse(
        stats=stats_model(result.stats),
        monthly_activity=[activity_model(b) for b in result.monthly_activity],
    )
