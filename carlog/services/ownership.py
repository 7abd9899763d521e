"""
Ownership checks composed ahead of every vehicle-scoped operation.

A vehicle that does not exist and a vehicle owned by someone else are
reported the same way, so callers cannot probe for other users' records.
"""

from sqlalchemy.orm import Session

from carlog.core.errors import NotFoundError
from carlog.models.vehicle import Vehicle

def owns_vehicle(db: Session, user_id: str, vehicle_id: str) -> bool:
    """Whether ``user_id`` is the recorded owner of ``vehicle_id``."""
    return (
        db.query(Vehicle.id)
        .filter(Vehicle.id == vehicle_id, Vehicle.user_id == user_id)
        .first()
        is not None
    )

def require_vehicle_owner(db: Session, user_id: str, vehicle_id: str) -> None:
    if not owns_vehicle(db, user_id, vehicle_id):
        raise NotFoundError("Vehicle not found")

def get_owned_vehicle(db: Session, user_id: str, vehicle_id: str) -> Vehicle:
    vehicle = (
        db.query(Vehicle)
        .filter(Vehicle.id == vehicle_id, Vehicle.user_id == user_id)
        .first()
    )
    if vehicle is None:
        raise NotFoundError("Vehicle not found")
    return vehicle
