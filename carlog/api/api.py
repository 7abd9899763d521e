from fastapi import APIRouter

from carlog.api.endpoints import auth, fuel_logs, health, reminders, service_logs, vehicles

# Create API router
api_router = APIRouter()

# Include endpoint routers with appropriate prefixes and tags
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
api_router.include_router(fuel_logs.router, prefix="/fuel-logs", tags=["fuel-logs"])
api_router.include_router(service_logs.router, prefix="/service-logs", tags=["service-logs"])
api_router.include_router(reminders.router, prefix="/reminders", tags=["reminders"])
