from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from carlog.api.deps import get_pagination, get_service_log_service
from carlog.core.security import get_current_user
from carlog.db.session import get_db
from carlog.schemas.auth import TokenPayload
from carlog.schemas.logs import ServiceLogCreate, ServiceLogOut, ServiceLogUpdate
from carlog.services.log_services import ServiceLogService
from carlog.services.pagination import PaginationParams

router = APIRouter()

@router.get("/{vehicle_id}")
def list_service_logs(
    vehicle_id: str,
    pagination: PaginationParams = Depends(get_pagination),
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ServiceLogService = Depends(get_service_log_service),
):
    """List a vehicle's service history, most recent first."""
    service_logs, meta = service.list(db, current_user.user_id, vehicle_id, pagination)
    return {
        "success": True,
        "data": {"serviceLogs": [ServiceLogOut.model_validate(s) for s in service_logs]},
        "pagination": meta,
    }

@router.get("/{vehicle_id}/{service_log_id}")
def get_service_log(
    vehicle_id: str,
    service_log_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ServiceLogService = Depends(get_service_log_service),
):
    service_log = service.get(db, current_user.user_id, vehicle_id, service_log_id)
    return {"success": True, "data": {"serviceLog": ServiceLogOut.model_validate(service_log)}}

@router.post("/{vehicle_id}", status_code=status.HTTP_201_CREATED)
def create_service_log(
    vehicle_id: str,
    payload: ServiceLogCreate,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ServiceLogService = Depends(get_service_log_service),
):
    service_log = service.create(db, current_user.user_id, vehicle_id, payload)
    return {"success": True, "data": {"serviceLog": ServiceLogOut.model_validate(service_log)}}

@router.put("/{vehicle_id}/{service_log_id}")
def update_service_log(
    vehicle_id: str,
    service_log_id: str,
    payload: ServiceLogUpdate,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ServiceLogService = Depends(get_service_log_service),
):
    service_log = service.update(db, current_user.user_id, vehicle_id, service_log_id, payload)
    return {"success": True, "data": {"serviceLog": ServiceLogOut.model_validate(service_log)}}

@router.delete("/{vehicle_id}/{service_log_id}")
def delete_service_log(
    vehicle_id: str,
    service_log_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ServiceLogService = Depends(get_service_log_service),
):
    service.delete(db, current_user.user_id, vehicle_id, service_log_id)
    return {"success": True, "message": "Service log deleted successfully"}
