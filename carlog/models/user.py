"""
SQLAlchemy model for the users table.
"""

from sqlalchemy import Column, Integer, JSON, String
from sqlalchemy.orm import relationship

from carlog.db.session import Base
from carlog.db.base_model import BaseModel

class User(Base, BaseModel):
    """
    A registered account.

    ``refresh_tokens`` holds the refresh tokens that are still redeemable,
    oldest first. ``token_version`` is bumped by SQLAlchemy on every update so
    two requests rewriting the token list at once cannot silently overwrite
    each other.
    """
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    refresh_tokens = Column(JSON, nullable=False, default=list)
    token_version = Column(Integer, nullable=False, default=1)

    vehicles = relationship("Vehicle", back_populates="owner", cascade="all, delete-orphan")

    __mapper_args__ = {"version_id_col": token_version}

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"
