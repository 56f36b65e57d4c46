"""Expense routes: windowed report and expense records."""

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.time_local import LocalTimeAdapter
from src.api.deps import (
    get_expense_repo,
    get_expense_service,
    get_rules,
    get_time_adapter,
    get_vehicle_repo,
    raise_stock_errors,
)
from src.api.schemas import (
    ExpenseReportResponse,
    ExpenseRequest,
    ExpenseResponse,
    expense_response,
    group_model,
)
from src.app_shell.filter_state import ExpenseFilterState
from src.components.reports import ExpenseReportQuery, run_expense_report
from src.components.stock import ExpenseInput, ExpenseRepoPort, ExpenseService, VehicleRepoPort
from src.rules.models import DealerRules

router = APIRouter()


@router.get("", response_model=ExpenseReportResponse)
def get_expense_report(
    mode: str = Query("all", description="all, today, week, month or custom"),
    start: str = Query(""),
    end: str = Query(""),
    q: str = Query("", description="Search over model and number"),
    vehicles: VehicleRepoPort = Depends(get_vehicle_repo),
    expenses: ExpenseRepoPort = Depends(get_expense_repo),
    time: LocalTimeAdapter = Depends(get_time_adapter),
    rules: DealerRules = Depends(get_rules),
) -> ExpenseReportResponse:
    """Expenses in the window, grouped by vehicle. A start or end date implies custom."""
    try:
        state = ExpenseFilterState.from_params(mode, start, end)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    result = run_expense_report(
        ExpenseReportQuery(window=state.criteria(), search_term=q),
        vehicles,
        expenses,
        time,
        week_starts_on=rules.analytics.week_starts_on,
    )
    return ExpenseReportResponse(
        window_label=result.window_label,
        groups=[group_model(g) for g in result.groups],
        total_amount=result.total_amount,
    )


@router.post("", response_model=ExpenseResponse, status_code=201)
def add_expense(
    data: ExpenseRequest,
    service: ExpenseService = Depends(get_expense_service),
) -> ExpenseResponse:
    expense, errors = service.add_expense(ExpenseInput(**data.model_dump()))
    if expense is None:
        raise_stock_errors(errors)
    return expense_response(expense)


@router.put("/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    expense_id: str,
    data: ExpenseRequest,
    service: ExpenseService = Depends(get_expense_service),
) -> ExpenseResponse:
    expense, errors = service.update_expense(expense_id, ExpenseInput(**data.model_dump()))
    if expense is None:
        raise_stock_errors(errors)
    return expense_response(expense)


@router.delete("/{expense_id}", status_code=204)
def delete_expense(
    expense_id: str,
    service: ExpenseService = Depends(get_expense_service),
) -> None:
    success, errors = service.delete_expense(expense_id)
    if not success:
        raise_stock_errors(errors)
