from datetime import datetime
from typing import Annotated, Optional
from pydantic import EmailStr, Field, StringConstraints

from carlog.schemas.common import CamelModel, UtcTimestamp

TokenStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

class RegisterRequest(CamelModel):
    """Schema for account registration."""
    email: EmailStr = Field(..., description="Account email, unique ignoring case")
    password: str = Field(..., min_length=6, description="Password, at least 6 characters")

class LoginRequest(CamelModel):
    """Schema for login."""
    email: EmailStr = Field(..., description="Account email")
    password: str = Field(..., min_length=1, description="Account password")

class RefreshRequest(CamelModel):
    """Schema carrying a refresh token, used by refresh and logout."""
    refresh_token: TokenStr = Field(..., description="Refresh token issued at login or last refresh")

class TokenPair(CamelModel):
    """Access/refresh token pair returned to clients."""
    access_token: str = Field(..., description="Short-lived bearer token")
    refresh_token: str = Field(..., description="Single-use token for obtaining a new pair")

class TokenPayload(CamelModel):
    """Claims carried by both token kinds."""
    user_id: str = Field(..., description="ID of the token owner")
    email: str = Field(..., description="Email of the token owner")
    type: Optional[str] = Field(None, description="'access' or 'refresh'")
    jti: Optional[str] = Field(None, description="Unique token identifier")
    exp: Optional[datetime] = Field(None, description="Expiry")

class UserOut(CamelModel):
    """Public representation of a user. Never includes credentials."""
    id: str = Field(..., description="User ID")
    email: str = Field(..., description="Account email")
    created_at: UtcTimestamp = Field(..., description="Registration timestamp")
