import os
from functools import lru_cache
from pathlib import Path
from typing import NoReturn

from fastapi import Depends, HTTPException

from src.adapters.sqlite.repos import SQLiteExpenseRepo, SQLiteVehicleRepo
from src.adapters.time_local import LocalTimeAdapter, create_time_adapter
from src.components.stock import (
    ExpenseRepoPort,
    ExpenseService,
    StockValidationError,
    VehicleRepoPort,
    VehicleService,
)
from src.rules.loader import load_rules
from src.rules.models import DealerRules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("DEALER_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "dealer.db")
        self.rules_path = Path(
            os.environ.get("DEALER_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> DealerRules:
    return load_rules(settings.rules_path)


# --- Repos ---
def get_vehicle_repo(settings: Settings = Depends(get_settings)) -> VehicleRepoPort:
    return SQLiteVehicleRepo(settings.db_path)


def get_expense_repo(settings: Settings = Depends(get_settings)) -> ExpenseRepoPort:
    return SQLiteExpenseRepo(settings.db_path)


# --- Component Services ---
def get_vehicle_service(
    repo: VehicleRepoPort = Depends(get_vehicle_repo),
) -> VehicleService:
    """Get vehicle stock service."""
    return VehicleService(repo=repo)


def get_expense_service(
    repo: ExpenseRepoPort = Depends(get_expense_repo),
    vehicles: VehicleRepoPort = Depends(get_vehicle_repo),
) -> ExpenseService:
    """Get expense service."""
    return ExpenseService(repo=repo, vehicles=vehicles)


# --- Time ---
def get_time_adapter(rules: DealerRules = Depends(get_rules)) -> LocalTimeAdapter:
    return create_time_adapter(rules.analytics.timezone)


# --- Errors ---
def raise_stock_errors(errors: list[StockValidationError]) -> NoReturn:
    """Missing records become 404, everything else 400 with the error list."""
    for err in errors:
        if err.code.endswith("_not_found") and err.field is None:
            raise HTTPException(status_code=404, detail=err.message)
    raise HTTPException(
        status_code=400,
        detail=[{"code": err.code, "message": err.message, "field": err.field} for err in errors],
    )
