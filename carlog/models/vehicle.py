"""
SQLAlchemy model for the vehicles table.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from carlog.db.session import Base
from carlog.db.base_model import BaseModel

class Vehicle(Base, BaseModel):
    """
    A vehicle owned by a single user. Deleting it removes its fuel logs,
    service logs and reminders.
    """
    __tablename__ = "vehicles"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    make = Column(String(50), nullable=False)
    vehicle_model = Column(String(50), nullable=False)
    year = Column(Integer, nullable=False)
    mileage = Column(Integer, nullable=True)

    # Define relationships
    owner = relationship("User", back_populates="vehicles")
    fuel_logs = relationship("FuelLog", back_populates="vehicle", cascade="all, delete-orphan")
    service_logs = relationship("ServiceLog", back_populates="vehicle", cascade="all, delete-orphan")
    reminders = relationship("Reminder", back_populates="vehicle", cascade="all, delete-orphan")
