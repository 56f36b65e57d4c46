from dataclasses import asdict
from typing import Literal

from pydantic import BaseModel, Field

from src.components.finance import DashboardStats, SalesSummary, VehicleFinancials
from src.components.reports import InventoryItem, VehicleExpenseGroup
from src.components.search import SearchResult
from src.components.timeseries import MonthlyActivity, MonthlySales
from src.domain.entities import Expense, Vehicle

# --- Shared Enums/Types ---
VehicleStatus = Literal["Available", "Pending", "Workshop", "Sold"]


# --- Vehicle Requests ---
class PurchaseRequest(BaseModel):
    brand_model: str
    vehicle_number: str
    purchase_date: str
    purchase_price: float
    seller_name: str
    seller_place: str
    seller_contact: str = ""
    seller_address: str | None = None
    purchase_bill: str | None = None
    purchase_balance: float | None = None
    is_partnership: bool = False
    partner_name: str | None = None
    notes: str | None = None


class SaleRequest(BaseModel):
    sale_date: str
    selling_price: float
    buyer_name: str
    buyer_contact: str = ""
    buyer_place: str = ""
    buyer_address: str | None = None
    sale_bill: str | None = None
    sale_balance: float | None = None
    financier_name: str | None = None
    financier_amount: float | None = None
    finance_credited_date: str | None = None


class VehicleUpdateRequest(BaseModel):
    """Partial update; only fields present in the body are applied."""

    status: VehicleStatus | None = None
    brand_model: str | None = None
    vehicle_number: str | None = None
    purchase_date: str | None = None
    purchase_price: float | None = None
    seller_name: str | None = None
    seller_contact: str | None = None
    seller_place: str | None = None
    seller_address: str | None = None
    purchase_bill: str | None = None
    purchase_balance: float | None = None
    is_partnership: bool | None = None
    partner_name: str | None = None
    notes: str | None = None

    sale_date: str | None = None
    selling_price: float | None = None
    buyer_name: str | None = None
    buyer_contact: str | None = None
    buyer_place: str | None = None
    buyer_address: str | None = None
    sale_bill: str | None = None
    sale_balance: float | None = None
    financier_name: str | None = None
    financier_amount: float | None = None
    finance_credited_date: str | None = None


# --- Expense Requests ---
class ExpenseRequest(BaseModel):
    vehicle_id: str
    amount: float
    date: str
    description: str | None = None


# --- Responses ---
class SaleModel(BaseModel):
    sale_date: str | None = None
    selling_price: float | None = None
    buyer_name: str | None = None
    buyer_contact: str | None = None
    buyer_place: str | None = None
    buyer_address: str | None = None
    sale_bill: str | None = None
    sale_balance: float | None = None
    financier_name: str | None = None
    financier_amount: float | None = None
    finance_credited_date: str | None = None


class VehicleResponse(BaseModel):
    id: str
    status: VehicleStatus
    brand_model: str
    vehicle_number: str
    purchase_date: str
    purchase_price: float
    seller_name: str
    seller_contact: str
    seller_place: str
    seller_address: str | None
    purchase_bill: str | None
    purchase_balance: float | None
    is_partnership: bool
    partner_name: str | None
    notes: str | None
    sale: SaleModel | None = None


class FinancialsModel(BaseModel):
    purchase_price: float
    purchase_balance: float
    total_expenses: float
    total_spent: float
    amount_released: float | None
    sale_balance: float | None
    profit: float | None


class VehicleWithFinancials(BaseModel):
    vehicle: VehicleResponse
    financials: FinancialsModel


class InventoryResponse(BaseModel):
    items: list[VehicleWithFinancials]
    total: int


class StatsModel(BaseModel):
    total_vehicles: int
    current_stock: int
    available_count: int
    total_invested: float
    total_profit: float


class MonthlyActivityModel(BaseModel):
    month: str = Field(description="YYYY-MM")
    label: str
    purchases: int
    sales: int


class DashboardResponse(BaseModel):
    stats: StatsModel
    monthly_activity: list[MonthlyActivityModel]


class MonthlySalesModel(BaseModel):
    month: str
    label: str
    sales: int


class SalesSummaryModel(BaseModel):
    sale_count: int
    total_profit: float


class SalesReportResponse(BaseModel):
    items: list[VehicleWithFinancials]
    summary: SalesSummaryModel
    monthly_sales: list[MonthlySalesModel]
    peak_month: str | None


class ExpenseResponse(BaseModel):
    id: str
    vehicle_id: str
    amount: float
    date: str
    description: str | None


class VehicleExpenseGroupModel(BaseModel):
    vehicle: VehicleResponse
    expenses: list[ExpenseResponse]
    total: float


class ExpenseReportResponse(BaseModel):
    window_label: str
    groups: list[VehicleExpenseGroupModel]
    total_amount: float


class SearchResultModel(BaseModel):
    status: VehicleStatus
    route_hint: str
    vehicle: VehicleResponse


class SearchResponse(BaseModel):
    term: str
    results: list[SearchResultModel]
    total: int
    counts_by_status: dict[str, int]


# --- Converters ---
def vehicle_response(vehicle: Vehicle) -> VehicleResponse:
    sale = vehicle.sale_facts
    return VehicleResponse(
        **vehicle.model_dump(exclude={"sale"}),
        sale=SaleModel(**sale.model_dump()) if sale is not None else None,
    )


def expense_response(expense: Expense) -> ExpenseResponse:
    return ExpenseResponse(**expense.model_dump())


def financials_model(financials: VehicleFinancials) -> FinancialsModel:
    return FinancialsModel(**asdict(financials))


def item_model(item: InventoryItem) -> VehicleWithFinancials:
    return VehicleWithFinancials(
        vehicle=vehicle_response(item.vehicle),
        financials=financials_model(item.financials),
    )


def stats_model(stats: DashboardStats) -> StatsModel:
    return StatsModel(**asdict(stats))


def activity_model(bucket: MonthlyActivity) -> MonthlyActivityModel:
    return MonthlyActivityModel(
        month=str(bucket.month),
        label=bucket.label,
        purchases=bucket.purchases,
        sales=bucket.sales,
    )


def monthly_sales_model(bucket: MonthlySales) -> MonthlySalesModel:
    return MonthlySalesModel(month=str(bucket.month), label=bucket.label, sales=bucket.sales)


def summary_model(summary: SalesSummary) -> SalesSummaryModel:
    return SalesSummaryModel(**asdict(summary))


def group_model(group: VehicleExpenseGroup) -> VehicleExpenseGroupModel:
    return VehicleExpenseGroupModel(
        vehicle=vehicle_response(group.vehicle),
        expenses=[expense_response(e) for e in group.expenses],
        total=group.total,
    )


def search_result_model(result: SearchResult) -> SearchResultModel:
    return SearchResultModel(
        status=result.status,
        route_hint=result.route_hint,
        vehicle=vehicle_response(result.vehicle),
    )
