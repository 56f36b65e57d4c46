"""Vehicle routes: purchases, edits, sales and workshop moves."""

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_vehicle_service, raise_stock_errors
from src.api.schemas import (
    PurchaseRequest,
    SaleRequest,
    VehicleResponse,
    VehicleUpdateRequest,
    vehicle_response,
)
from src.components.stock import PurchaseInput, SaleInput, VehicleService

router = APIRouter()


@router.post("", response_model=VehicleResponse, status_code=201)
def record_purchase(
    data: PurchaseRequest,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    """Record a purchased vehicle. New stock is always Available."""
    vehicle, errors = service.record_purchase(PurchaseInput(**data.model_dump()))
    if vehicle is None:
        raise_stock_errors(errors)
    return vehicle_response(vehicle)


@router.get("/{vehicle_id}", response_model=VehicleResponse)
def get_vehicle(
    vehicle_id: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    vehicle = service.get_by_id(vehicle_id)
    if vehicle is None:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return vehicle_response(vehicle)


@router.put("/{vehicle_id}", response_model=VehicleResponse)
def update_vehicle(
    vehicle_id: str,
    data: VehicleUpdateRequest,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    """Apply the fields present in the body. Leaving Sold clears the sale facts."""
    vehicle, errors = service.update_vehicle(vehicle_id, data.model_dump(exclude_unset=True))
    if vehicle is None:
        raise_stock_errors(errors)
    return vehicle_response(vehicle)


@router.post("/{vehicle_id}/sale", response_model=VehicleResponse)
def record_sale(
    vehicle_id: str,
    data: SaleRequest,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    vehicle, errors = service.record_sale(vehicle_id, SaleInput(**data.model_dump()))
    if vehicle is None:
        raise_stock_errors(errors)
    return vehicle_response(vehicle)


@router.post("/{vehicle_id}/workshop", response_model=VehicleResponse)
def send_to_workshop(
    vehicle_id: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    vehicle, errors = service.send_to_workshop(vehicle_id)
    if vehicle is None:
        raise_stock_errors(errors)
    return vehicle_response(vehicle)


@router.delete("/{vehicle_id}", status_code=204)
def delete_vehicle(
    vehicle_id: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> None:
    """Delete a vehicle. Its expenses are kept and no longer counted."""
    success, errors = service.delete(vehicle_id)
    if not success:
        raise_stock_errors(errors)
