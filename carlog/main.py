import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from carlog.api.api import api_router
from carlog.core.config import settings
from carlog.core.errors import AppError
from carlog.core.middleware import REQUEST_ID_HEADER, add_middleware
from carlog.db.init_db import init_db
from carlog.services.auth_service import AuthService
from carlog.services.log_services import FuelLogService, ServiceLogService
from carlog.services.reminder_service import ReminderService
from carlog.services.token_service import TokenService
from carlog.services.vehicle_service import VehicleService

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="CarLog API for tracking vehicles, fuel, services and maintenance reminders",
    version="0.1.0",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
)

# Set CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
add_middleware(app)

# Services are stateless and shared by every request
token_service = TokenService.from_settings(settings)
app.state.token_service = token_service
app.state.auth_service = AuthService(
    token_service,
    max_refresh_tokens=settings.MAX_REFRESH_TOKENS,
    write_attempts=settings.TOKEN_WRITE_ATTEMPTS,
)
app.state.vehicle_service = VehicleService()
app.state.fuel_log_service = FuelLogService()
app.state.service_log_service = ServiceLogService()
app.state.reminder_service = ReminderService()

def error_body(message: str) -> dict:
    return {"success": False, "message": message}

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message), headers=headers)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        message = str(error.get("msg", "Invalid value")).replace("Value error, ", "")
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        messages.append(f"{'.'.join(location)}: {message}" if location else message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(f"Validation error: {', '.join(messages)}"),
    )

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = "Route not found"
    return JSONResponse(status_code=exc.status_code, content=error_body(message), headers=exc.headers)

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # Raised past RequestContextMiddleware, so the request ID is added here
    request_id = getattr(request.state, "request_id", None)
    logger.exception(f"Unhandled error on {request.method} {request.url.path} [{request_id}]")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
        headers={REQUEST_ID_HEADER: request_id} if request_id else None,
    )

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/")
async def root():
    """Root endpoint with basic service information."""
    return {
        "message": "Welcome to CarLog API",
        "version": "0.1.0",
        "docs_url": "/docs",
    }

@app.get("/health")
async def health():
    """Liveness probe that does not touch the database."""
    return {"status": "ok"}

@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    logger.info("Starting CarLog API...")
    if settings.AUTO_CREATE_TABLES:
        init_db()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("carlog.main:app", host="0.0.0.0", port=8000, reload=True)
