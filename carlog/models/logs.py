"""
SQLAlchemy models for per-vehicle fuel and service history.
"""

from datetime import datetime
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from carlog.db.session import Base
from carlog.db.base_model import BaseModel

class FuelLog(Base, BaseModel):
    """A single refuelling."""
    __tablename__ = "fuel_logs"

    vehicle_id = Column(String(36), ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    mileage = Column(Integer, nullable=False)
    fuel_amount = Column(Float, nullable=False)
    total_cost = Column(Float, nullable=False)
    notes = Column(String(500), nullable=True)

    vehicle = relationship("Vehicle", back_populates="fuel_logs")

class ServiceLog(Base, BaseModel):
    """A workshop visit or DIY service."""
    __tablename__ = "service_logs"

    vehicle_id = Column(String(36), ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    mileage = Column(Integer, nullable=False)
    service_type = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    mechanic = Column(String(100), nullable=True)
    total_cost = Column(Float, nullable=False, default=0.0)
    notes = Column(String(500), nullable=True)

    vehicle = relationship("Vehicle", back_populates="service_logs")
