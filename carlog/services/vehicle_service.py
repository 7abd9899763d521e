import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from carlog.models.vehicle import Vehicle
from carlog.schemas.vehicle import VehicleCreate, VehicleUpdate
from carlog.services.ownership import get_owned_vehicle
from carlog.services.pagination import PaginationParams, paginate

logger = logging.getLogger(__name__)

class VehicleService:
    """CRUD over the acting user's vehicles."""

    def list(self, db: Session, user_id: str, params: PaginationParams) -> Tuple[List[Vehicle], dict]:
        query = db.query(Vehicle).filter(Vehicle.user_id == user_id)
        return paginate(query, params, Vehicle.created_at.desc(), Vehicle.id)

    def get(self, db: Session, user_id: str, vehicle_id: str) -> Vehicle:
        return get_owned_vehicle(db, user_id, vehicle_id)

    def create(self, db: Session, user_id: str, data: VehicleCreate) -> Vehicle:
        vehicle = Vehicle(user_id=user_id, **data.model_dump(exclude_none=True))
        db.add(vehicle)
        db.commit()
        db.refresh(vehicle)
        logger.info(f"User {user_id} added vehicle {vehicle.id}")
        return vehicle

    def update(self, db: Session, user_id: str, vehicle_id: str, data: VehicleUpdate) -> Vehicle:
        vehicle = get_owned_vehicle(db, user_id, vehicle_id)
        # Only the fields sent by the client are touched
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(vehicle, field, value)
        db.commit()
        db.refresh(vehicle)
        return vehicle

    def delete(self, db: Session, user_id: str, vehicle_id: str) -> None:
        """Delete a vehicle together with its logs and reminders."""
        vehicle = get_owned_vehicle(db, user_id, vehicle_id)
        db.delete(vehicle)
        db.commit()
        logger.info(f"User {user_id} deleted vehicle {vehicle_id}")
