"""
Registration, login, refresh-token rotation and logout.

A refresh token is redeemable only while it is present in its owner's
``refresh_tokens`` list. The list is ordered oldest first and capped at
``max_refresh_tokens``: issuing a new token beyond the cap evicts the oldest
ones. Redeeming a token removes it and appends its replacement, so each
refresh token can be used exactly once.

Token-list writes are read-modify-write on the user row, guarded by the
``token_version`` counter. A write that loses a race raises
``StaleDataError``; the change is then re-applied to the fresh row.
"""

import logging
from typing import Callable, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from carlog.core.errors import ConflictError, InvalidCredentialsError, InvalidTokenError
from carlog.core.security import get_password_hash, verify_password
from carlog.db.base_model import generate_id
from carlog.models.user import User
from carlog.schemas.auth import TokenPair
from carlog.services.token_service import TokenService

logger = logging.getLogger(__name__)

# Receives the user and a copy of its token list. Returns the new list, or
# None when nothing needs to be written.
TokenChange = Callable[[User, List[str]], Optional[List[str]]]

def normalize_email(email: str) -> str:
    return email.strip().lower()

class AuthService:
    """Orchestrates the session lifecycle on top of the token service."""

    def __init__(self, token_service: TokenService, max_refresh_tokens: int = 5, write_attempts: int = 3):
        self.token_service = token_service
        self.max_refresh_tokens = max_refresh_tokens
        self.write_attempts = write_attempts

    def register(self, db: Session, email: str, password: str) -> Tuple[User, TokenPair]:
        """
        Create an account and open its first session.

        Raises:
            ConflictError: an account with this email (ignoring case) exists.
        """
        email = normalize_email(email)
        if self.find_by_email(db, email) is not None:
            raise ConflictError("User already exists")

        user = User(
            id=generate_id(),
            email=email,
            password_hash=get_password_hash(password),
            refresh_tokens=[],
        )
        tokens = self.token_service.issue(user)
        user.refresh_tokens = [tokens.refresh_token]
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race against a concurrent registration for the same email
            db.rollback()
            raise ConflictError("User already exists")
        db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return user, tokens

    def login(self, db: Session, email: str, password: str) -> Tuple[User, TokenPair]:
        """
        Check credentials and open a new session.

        Unknown email and wrong password fail with the same error.
        """
        user = self.find_by_email(db, email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError("Invalid credentials")

        issued = {}

        def add_session(owner: User, tokens: List[str]) -> List[str]:
            issued["tokens"] = self.token_service.issue(owner)
            return tokens + [issued["tokens"].refresh_token]

        user = self._write_tokens(db, user.id, add_session)
        logger.info(f"User {user.id} logged in")
        return user, issued["tokens"]

    def refresh(self, db: Session, refresh_token: str) -> TokenPair:
        """
        Redeem a refresh token for a new pair, revoking the redeemed token.

        Every failure (bad signature, expired, unknown user, token already
        redeemed or revoked) raises the same InvalidTokenError.
        """
        payload = self.token_service.verify_refresh(refresh_token)
        issued = {}

        def rotate(owner: User, tokens: List[str]) -> List[str]:
            if refresh_token not in tokens:
                raise InvalidTokenError("Invalid refresh token")
            tokens.remove(refresh_token)
            issued["tokens"] = self.token_service.issue(owner)
            return tokens + [issued["tokens"].refresh_token]

        try:
            user = self._write_tokens(db, payload.user_id, rotate)
        except InvalidTokenError:
            logger.warning(f"Refresh token for user {payload.user_id} is not active")
            raise
        if user is None:
            raise InvalidTokenError("Invalid refresh token")

        logger.info(f"Rotated refresh token for user {user.id}")
        return issued["tokens"]

    def logout(self, db: Session, user_id: str, refresh_token: str) -> None:
        """
        Revoke one refresh token. Idempotent: an unknown user or an already
        revoked token is not an error.
        """

        def revoke(owner: User, tokens: List[str]) -> Optional[List[str]]:
            if refresh_token not in tokens:
                return None
            tokens.remove(refresh_token)
            return tokens

        user = self._write_tokens(db, user_id, revoke)
        if user is not None:
            logger.info(f"User {user_id} logged out")

    def get_user(self, db: Session, user_id: str) -> Optional[User]:
        return db.get(User, user_id)

    def find_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == normalize_email(email)).first()

    def _write_tokens(self, db: Session, user_id: str, change: TokenChange) -> Optional[User]:
        """
        Apply ``change`` to the user's token list and commit, keeping only
        the newest ``max_refresh_tokens`` entries.

        Returns the user, or None when no such user exists.
        """
        for attempt in range(1, self.write_attempts + 1):
            user = db.get(User, user_id)
            if user is None:
                return None

            tokens = change(user, list(user.refresh_tokens or []))
            if tokens is None:
                return user

            user.refresh_tokens = tokens[-self.max_refresh_tokens:]
            try:
                db.commit()
            except StaleDataError:
                db.rollback()
                logger.warning(
                    f"Concurrent session update for user {user_id} "
                    f"(attempt {attempt}/{self.write_attempts})"
                )
                continue
            return user

        raise ConflictError("Session was modified concurrently, please retry")
