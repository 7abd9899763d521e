from typing import Annotated, Optional
from pydantic import Field, StringConstraints

from carlog.schemas.common import CamelModel, Mileage, PatchModel, UtcDatetime, UtcTimestamp

Notes = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

class FuelLogCreate(CamelModel):
    """Schema for recording a refuelling."""
    date: Optional[UtcDatetime] = Field(None, description="When the fill-up happened, defaults to now")
    mileage: Mileage = Field(..., description="Odometer reading")
    fuel_amount: float = Field(..., ge=0, description="Fuel added")
    total_cost: float = Field(..., ge=0, description="Amount paid")
    notes: Optional[Notes] = None

class FuelLogUpdate(PatchModel):
    """Schema for updating a fuel log. All fields optional."""
    date: Optional[UtcDatetime] = None
    mileage: Optional[Mileage] = None
    fuel_amount: Optional[float] = Field(None, ge=0)
    total_cost: Optional[float] = Field(None, ge=0)
    notes: Optional[Notes] = None

    non_nullable = ("date", "mileage", "fuel_amount", "total_cost")

class FuelLogOut(CamelModel):
    id: str
    vehicle_id: str
    date: UtcTimestamp
    mileage: int
    fuel_amount: float
    total_cost: float
    notes: Optional[str] = None
    created_at: UtcTimestamp
    updated_at: UtcTimestamp

class ServiceLogCreate(CamelModel):
    """Schema for recording a service."""
    date: Optional[UtcDatetime] = Field(None, description="When the service happened, defaults to now")
    mileage: Mileage = Field(..., description="Odometer reading")
    service_type: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    description: Optional[Notes] = None
    mechanic: Optional[Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]] = None
    total_cost: float = Field(0.0, ge=0, description="Amount paid")
    notes: Optional[Notes] = None

class ServiceLogUpdate(PatchModel):
    """Schema for updating a service log. All fields optional."""
    date: Optional[UtcDatetime] = None
    mileage: Optional[Mileage] = None
    service_type: Optional[Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]] = None
    description: Optional[Notes] = None
    mechanic: Optional[Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]] = None
    total_cost: Optional[float] = Field(None, ge=0)
    notes: Optional[Notes] = None

    non_nullable = ("date", "mileage", "service_type", "total_cost")

class ServiceLogOut(CamelModel):
    id: str
    vehicle_id: str
    date: UtcTimestamp
    mileage: int
    service_type: str
    description: Optional[str] = None
    mechanic: Optional[str] = None
    total_cost: float
    notes: Optional[str] = None
    created_at: UtcTimestamp
    updated_at: UtcTimestamp
