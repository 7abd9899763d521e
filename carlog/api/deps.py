"""
FastAPI dependencies that hand the long-lived service objects to handlers.

The services are built once in ``carlog.main`` and kept on ``app.state``.
"""

from typing import Optional

from fastapi import Query, Request

from carlog.services.auth_service import AuthService
from carlog.services.log_services import FuelLogService, ServiceLogService
from carlog.services.pagination import PaginationParams, get_pagination_params
from carlog.services.reminder_service import ReminderService
from carlog.services.vehicle_service import VehicleService

def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service

def get_vehicle_service(request: Request) -> VehicleService:
    return request.app.state.vehicle_service

def get_fuel_log_service(request: Request) -> FuelLogService:
    return request.app.state.fuel_log_service

def get_service_log_service(request: Request) -> ServiceLogService:
    return request.app.state.service_log_service

def get_reminder_service(request: Request) -> ReminderService:
    return request.app.state.reminder_service

def get_pagination(
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Items per page, 1-100 (default 20)"),
) -> PaginationParams:
    """Lenient pagination: unparsable values fall back to the defaults."""
    return get_pagination_params(page, limit)
