import uuid
from datetime import datetime
from sqlalchemy import Column, DateTime, String

def generate_id() -> str:
    return str(uuid.uuid4())

class BaseModel:
    """Base class for all database models."""

    # Opaque string identifier surfaced to clients as ``id``
    id = Column(String(36), primary_key=True, default=generate_id, index=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
