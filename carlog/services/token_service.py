"""
Issuing and verifying JWT access and refresh tokens.

Both token kinds carry ``{userId, email}``. They are signed with different
secrets and tagged with a ``type`` claim, so an access token is never
accepted where a refresh token is expected and vice versa. Each token also
gets a random ``jti`` so that two tokens minted in the same second for the
same user are still distinct strings.

Verification is stateless. Whether a refresh token is still redeemable is
decided by the auth service against the owner's stored token list.
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Any, Dict

from jose import jwt
from jose.exceptions import JWTError
from pydantic import ValidationError as PydanticValidationError

from carlog.core.errors import InvalidTokenError
from carlog.schemas.auth import TokenPair, TokenPayload

logger = logging.getLogger(__name__)

ACCESS = "access"
REFRESH = "refresh"

class TokenService:
    """Mints and verifies the two token kinds. Holds no mutable state."""

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        algorithm: str = "HS256",
        access_ttl: timedelta = timedelta(minutes=15),
        refresh_ttl: timedelta = timedelta(days=7),
    ):
        if not access_secret or not refresh_secret:
            raise ValueError("Both token secrets are required")
        if access_secret == refresh_secret:
            raise ValueError("Access and refresh secrets must differ")
        self._secrets = {ACCESS: access_secret, REFRESH: refresh_secret}
        self._ttls = {ACCESS: access_ttl, REFRESH: refresh_ttl}
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings) -> "TokenService":
        return cls(
            access_secret=settings.JWT_ACCESS_SECRET,
            refresh_secret=settings.JWT_REFRESH_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            access_ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            refresh_ttl=timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
        )

    def issue(self, user, now: datetime = None) -> TokenPair:
        """Issue a fresh access/refresh pair for ``user``."""
        now = now or datetime.utcnow()
        claims = {"userId": str(user.id), "email": user.email}
        return TokenPair(
            access_token=self._encode(claims, ACCESS, now),
            refresh_token=self._encode(claims, REFRESH, now),
        )

    def verify_access(self, token: str) -> TokenPayload:
        return self._decode(token, ACCESS)

    def verify_refresh(self, token: str) -> TokenPayload:
        return self._decode(token, REFRESH)

    def _encode(self, claims: Dict[str, Any], kind: str, now: datetime) -> str:
        to_encode = dict(claims)
        to_encode.update({
            "type": kind,
            "jti": uuid.uuid4().hex,
            "iat": now,
            "exp": now + self._ttls[kind],
        })
        return jwt.encode(to_encode, self._secrets[kind], algorithm=self.algorithm)

    def _decode(self, token: str, kind: str) -> TokenPayload:
        if not token or not isinstance(token, str):
            raise InvalidTokenError(self._message(kind))
        try:
            # jose checks the signature and the exp claim
            claims = jwt.decode(token, self._secrets[kind], algorithms=[self.algorithm])
            payload = TokenPayload.model_validate(claims)
        except (JWTError, PydanticValidationError) as e:
            logger.debug(f"Rejected {kind} token: {e}")
            raise InvalidTokenError(self._message(kind))

        if payload.type != kind:
            raise InvalidTokenError(self._message(kind))
        return payload

    @staticmethod
    def _message(kind: str) -> str:
        return "Invalid refresh token" if kind == REFRESH else "Invalid token"
