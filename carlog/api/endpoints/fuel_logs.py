from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from carlog.api.deps import get_fuel_log_service, get_pagination
from carlog.core.security import get_current_user
from carlog.db.session import get_db
from carlog.schemas.auth import TokenPayload
from carlog.schemas.logs import FuelLogCreate, FuelLogOut, FuelLogUpdate
from carlog.services.log_services import FuelLogService
from carlog.services.pagination import PaginationParams

router = APIRouter()

@router.get("/{vehicle_id}")
def list_fuel_logs(
    vehicle_id: str,
    pagination: PaginationParams = Depends(get_pagination),
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: FuelLogService = Depends(get_fuel_log_service),
):
    """List a vehicle's fuel logs, newest first."""
    fuel_logs, meta = service.list(db, current_user.user_id, vehicle_id, pagination)
    return {
        "success": True,
        "count": len(fuel_logs),
        "data": {"fuelLogs": [FuelLogOut.model_validate(f) for f in fuel_logs]},
        "pagination": meta,
    }

@router.get("/{vehicle_id}/{fuel_log_id}")
def get_fuel_log(
    vehicle_id: str,
    fuel_log_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: FuelLogService = Depends(get_fuel_log_service),
):
    fuel_log = service.get(db, current_user.user_id, vehicle_id, fuel_log_id)
    return {"success": True, "data": {"fuelLog": FuelLogOut.model_validate(fuel_log)}}

@router.post("/{vehicle_id}", status_code=status.HTTP_201_CREATED)
def create_fuel_log(
    vehicle_id: str,
    payload: FuelLogCreate,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: FuelLogService = Depends(get_fuel_log_service),
):
    """Record a fill-up. ``date`` defaults to now."""
    fuel_log = service.create(db, current_user.user_id, vehicle_id, payload)
    return {"success": True, "data": {"fuelLog": FuelLogOut.model_validate(fuel_log)}}

@router.put("/{vehicle_id}/{fuel_log_id}")
def update_fuel_log(
    vehicle_id: str,
    fuel_log_id: str,
    payload: FuelLogUpdate,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: FuelLogService = Depends(get_fuel_log_service),
):
    fuel_log = service.update(db, current_user.user_id, vehicle_id, fuel_log_id, payload)
    return {"success": True, "data": {"fuelLog": FuelLogOut.model_validate(fuel_log)}}

@router.delete("/{vehicle_id}/{fuel_log_id}")
def delete_fuel_log(
    vehicle_id: str,
    fuel_log_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: FuelLogService = Depends(get_fuel_log_service),
):
    service.delete(db, current_user.user_id, vehicle_id, fuel_log_id)
    return {"success": True, "message": "Fuel log deleted successfully"}
