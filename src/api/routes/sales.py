"""Sales report route."""

from fastapi import APIRouter, Depends, Query

from src.adapters.time_local import LocalTimeAdapter
from src.api.deps import get_expense_repo, get_rules, get_time_adapter, get_vehicle_repo
from src.api.schemas import (
    SalesReportResponse,
    item_model,
    monthly_sales_model,
    summary_model,
)
from src.components.reports import SalesReportQuery, run_sales_report
from src.components.stock import ExpenseRepoPort, VehicleRepoPort
from src.rules.models import DealerRules

router = APIRouter()


@router.get("", response_model=SalesReportResponse)
def get_sales_report(
    q: str = Query("", description="Search over model, number and buyer"),
    date: str = Query("", description="Exact sale date, YYYY-MM-DD"),
    window_months: int | None = Query(None, ge=1, le=120),
    vehicles: VehicleRepoPort = Depends(get_vehicle_repo),
    expenses: ExpenseRepoPort = Depends(get_expense_repo),
    time: LocalTimeAdapter = Depends(get_time_adapter),
    rules: DealerRules = Depends(get_rules),
) -> SalesReportResponse:
    query = SalesReportQuery(
        search_term=q,
        sale_date=date,
        window_months=window_months or rules.analytics.sales_window_months,
    )
    result = run_sales_report(query, vehicles, expenses, time)
    return SalesReportResponse(
        items=[item_model(i) for i in result.items],
        summary=summary_model(result.summary),
        monthly_sales=[monthly_sales_model(b) for b in result.monthly_sales],
        peak_month=str(result.peak_month) if result.peak_month else None,
    )
