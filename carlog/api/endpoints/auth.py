from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from carlog.api.deps import get_auth_service
from carlog.core.errors import UnauthenticatedError
from carlog.core.security import get_current_user
from carlog.db.session import get_db
from carlog.schemas.auth import LoginRequest, RefreshRequest, RegisterRequest, TokenPayload, UserOut
from carlog.services.auth_service import AuthService

router = APIRouter()

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Create an account and return it with a first token pair.

    Fails with 409 when the email is already registered (ignoring case).
    """
    user, tokens = auth_service.register(db, payload.email, payload.password)
    return {"success": True, "data": {"user": UserOut.model_validate(user), "tokens": tokens}}

@router.post("/login")
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange email and password for a token pair.

    Unknown email and wrong password both answer 401 "Invalid credentials".
    """
    user, tokens = auth_service.login(db, payload.email, payload.password)
    return {"success": True, "data": {"user": UserOut.model_validate(user), "tokens": tokens}}

@router.post("/refresh")
def refresh(
    payload: RefreshRequest,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Redeem a refresh token for a new pair. The redeemed token stops working.
    """
    tokens = auth_service.refresh(db, payload.refresh_token)
    return {"success": True, "data": {"tokens": tokens}}

@router.post("/logout")
def logout(
    payload: RefreshRequest,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Revoke the given refresh token of the authenticated user."""
    auth_service.logout(db, current_user.user_id, payload.refresh_token)
    return {"success": True, "message": "Logged out successfully"}

@router.get("/me")
def me(
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Return the authenticated user."""
    user = auth_service.get_user(db, current_user.user_id)
    if user is None:
        raise UnauthenticatedError("User not found")
    return {"success": True, "data": {"user": UserOut.model_validate(user)}}
