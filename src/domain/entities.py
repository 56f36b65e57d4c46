from typing import Annotated, Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# --- Enums / Literals ---
VehicleStatus = Literal["Available", "Pending", "Workshop", "Sold"]
StockStatus = Literal["Available", "Pending", "Workshop"]

VEHICLE_STATUSES: tuple[VehicleStatus, ...] = ("Available", "Pending", "Workshop", "Sold")


def new_id() -> str:
    return str(uuid4())


# --- Sale facts ---

class SaleDetails(BaseModel):
    """Sale facts. Only ever attached to a sold vehicle."""

    model_config = ConfigDict(frozen=True)

    sale_date: str | None = None
    selling_price: float | None = Field(default=None, ge=0)
    buyer_name: str | None = None
    buyer_contact: str | None = None
    buyer_place: str | None = None
    buyer_address: str | None = None
    sale_bill: str | None = None
    sale_balance: float | None = None
    financier_name: str | None = None
    financier_amount: float | None = None
    finance_credited_date: str | None = None


# --- Vehicles ---

class VehicleBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    brand_model: str
    vehicle_number: str

    purchase_date: str
    purchase_price: float = Field(ge=0)
    seller_name: str
    seller_contact: str = ""
    seller_place: str = ""
    seller_address: str | None = None
    purchase_bill: str | None = None
    purchase_balance: float | None = None
    is_partnership: bool = False
    partner_name: str | None = None

    notes: str | None = None

    @property
    def sale_facts(self) -> SaleDetails | None:
        return None


class StockVehicle(VehicleBase):
    """A vehicle still held by the dealership. Carries no sale facts."""

    status: StockStatus = "Available"


class SoldVehicle(VehicleBase):
    status: Literal["Sold"] = "Sold"
    sale: SaleDetails = Field(default_factory=SaleDetails)

    @property
    def sale_facts(self) -> SaleDetails | None:
        return self.sale


Vehicle = Annotated[StockVehicle | SoldVehicle, Field(discriminator="status")]

_vehicle_adapter: TypeAdapter[StockVehicle | SoldVehicle] = TypeAdapter(Vehicle)


def parse_vehicle(data: dict[str, Any]) -> StockVehicle | SoldVehicle:
    """Validate a raw mapping into the variant matching its status."""
    payload = dict(data)
    payload.setdefault("status", "Available")
    return _vehicle_adapter.validate_python(payload)


# --- Expenses ---

class Expense(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    vehicle_id: str
    amount: float = Field(gt=0)
    date: str
    description: str | None = None
