import logging

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from passlib.context import CryptContext

from carlog.core.config import settings
from carlog.core.errors import InvalidTokenError, UnauthenticatedError
from carlog.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)

# Security scheme for Swagger UI. Missing credentials are reported by
# get_current_user so that every 401 shares the same error body.
security = HTTPBearer(auto_error=False)

# Salted bcrypt; the cost factor comes from settings so tests can lower it
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> TokenPayload:
    """Dependency to get the authenticated user from the bearer access token."""
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("No token provided")

    token_service = request.app.state.token_service
    try:
        return token_service.verify_access(credentials.credentials)
    except InvalidTokenError:
        logger.info(f"Rejected access token on {request.method} {request.url.path}")
        raise UnauthenticatedError("Invalid or expired token")
