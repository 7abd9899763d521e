"""
SQLAlchemy model for maintenance reminders.
"""

import enum
from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from carlog.db.session import Base
from carlog.db.base_model import BaseModel

class ReminderType(str, enum.Enum):
    DATE = "date"
    MILEAGE = "mileage"

class ReminderFilter(str, enum.Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ALL = "all"

class Reminder(Base, BaseModel):
    """
    A reminder that falls due either on a date or at an odometer reading,
    depending on ``type``.
    """
    __tablename__ = "reminders"

    vehicle_id = Column(String(36), ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    type = Column(
        Enum(ReminderType, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
        index=True,
    )
    due_date = Column(DateTime, nullable=True, index=True)
    due_mileage = Column(Integer, nullable=True, index=True)
    is_completed = Column(Boolean, nullable=False, default=False, index=True)
    completed_at = Column(DateTime, nullable=True)
    notes = Column(String(500), nullable=True)

    vehicle = relationship("Vehicle", back_populates="reminders")
