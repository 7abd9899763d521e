from datetime import datetime
from typing import Annotated, Optional
from pydantic import AfterValidator, Field, StringConstraints

from carlog.schemas.common import CamelModel, Mileage, PatchModel, UtcTimestamp

MIN_YEAR = 1900

def check_year(v: Optional[int]) -> Optional[int]:
    if v is not None and not MIN_YEAR <= v <= datetime.utcnow().year + 1:
        raise ValueError("Please enter a valid year")
    return v

Year = Annotated[int, AfterValidator(check_year)]

class VehicleCreate(CamelModel):
    """Schema for adding a vehicle."""
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    make: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
    vehicle_model: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
    year: Year = Field(..., description="Model year")
    mileage: Optional[Mileage] = Field(None, description="Current odometer reading")

class VehicleUpdate(PatchModel):
    """Schema for updating a vehicle. All fields optional."""
    name: Optional[Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]] = None
    make: Optional[Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]] = None
    vehicle_model: Optional[Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]] = None
    year: Optional[Year] = None
    mileage: Optional[Mileage] = None

    non_nullable = ("name", "make", "vehicle_model", "year")

class VehicleOut(CamelModel):
    """Schema for returning a vehicle."""
    id: str
    user_id: str
    name: str
    make: str
    vehicle_model: str
    year: int
    mileage: Optional[int] = None
    created_at: UtcTimestamp
    updated_at: UtcTimestamp
