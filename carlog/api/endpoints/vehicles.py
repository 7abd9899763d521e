from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from carlog.api.deps import get_pagination, get_vehicle_service
from carlog.core.security import get_current_user
from carlog.db.session import get_db
from carlog.schemas.auth import TokenPayload
from carlog.schemas.vehicle import VehicleCreate, VehicleOut, VehicleUpdate
from carlog.services.pagination import PaginationParams
from carlog.services.vehicle_service import VehicleService

router = APIRouter()

@router.get("")
def list_vehicles(
    pagination: PaginationParams = Depends(get_pagination),
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: VehicleService = Depends(get_vehicle_service),
):
    """List the authenticated user's vehicles, newest first."""
    vehicles, meta = service.list(db, current_user.user_id, pagination)
    return {
        "success": True,
        "count": len(vehicles),
        "data": {"vehicles": [VehicleOut.model_validate(v) for v in vehicles]},
        "pagination": meta,
    }

@router.get("/{vehicle_id}")
def get_vehicle(
    vehicle_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicle = service.get(db, current_user.user_id, vehicle_id)
    return {"success": True, "data": {"vehicle": VehicleOut.model_validate(vehicle)}}

@router.post("", status_code=status.HTTP_201_CREATED)
def create_vehicle(
    payload: VehicleCreate,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicle = service.create(db, current_user.user_id, payload)
    return {"success": True, "data": {"vehicle": VehicleOut.model_validate(vehicle)}}

@router.put("/{vehicle_id}")
def update_vehicle(
    vehicle_id: str,
    payload: VehicleUpdate,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: VehicleService = Depends(get_vehicle_service),
):
    """Update the fields present in the body; the rest stay as they are."""
    vehicle = service.update(db, current_user.user_id, vehicle_id, payload)
    return {"success": True, "data": {"vehicle": VehicleOut.model_validate(vehicle)}}

@router.delete("/{vehicle_id}")
def delete_vehicle(
    vehicle_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: VehicleService = Depends(get_vehicle_service),
):
    """Delete a vehicle along with its fuel logs, service logs and reminders."""
    service.delete(db, current_user.user_id, vehicle_id)
    return {"success": True, "message": "Vehicle deleted successfully"}
