"""
Shared CRUD for records that hang off a vehicle (fuel logs, service logs,
reminders).

Every operation first checks that the acting user owns the vehicle; a
failed check and a missing record both surface as NotFoundError.
"""

import logging
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel
from sqlalchemy.orm import Session

from carlog.core.errors import NotFoundError
from carlog.services.ownership import require_vehicle_owner
from carlog.services.pagination import PaginationParams, paginate

logger = logging.getLogger(__name__)

class VehicleRecordService:
    """Base service; subclasses set ``model`` and ``label``."""

    model = None
    label = "Record"

    def list(
        self, db: Session, user_id: str, vehicle_id: str, params: PaginationParams, **criteria: Any
    ) -> Tuple[List[Any], dict]:
        require_vehicle_owner(db, user_id, vehicle_id)
        query = self._scope(db.query(self.model).filter(self.model.vehicle_id == vehicle_id), **criteria)
        return paginate(query, params, *self._ordering(**criteria))

    def get(self, db: Session, user_id: str, vehicle_id: str, record_id: str):
        require_vehicle_owner(db, user_id, vehicle_id)
        return self._fetch(db, vehicle_id, record_id)

    def create(self, db: Session, user_id: str, vehicle_id: str, data: BaseModel):
        require_vehicle_owner(db, user_id, vehicle_id)
        # Omitted optional fields fall back to the column defaults
        record = self.model(vehicle_id=vehicle_id, **data.model_dump(exclude_none=True))
        db.add(record)
        db.commit()
        db.refresh(record)
        logger.info(f"Created {self.label.lower()} {record.id} for vehicle {vehicle_id}")
        return record

    def update(self, db: Session, user_id: str, vehicle_id: str, record_id: str, data: BaseModel):
        require_vehicle_owner(db, user_id, vehicle_id)
        record = self._fetch(db, vehicle_id, record_id)
        self._apply(record, data.model_dump(exclude_unset=True))
        db.commit()
        db.refresh(record)
        return record

    def delete(self, db: Session, user_id: str, vehicle_id: str, record_id: str) -> None:
        require_vehicle_owner(db, user_id, vehicle_id)
        record = self._fetch(db, vehicle_id, record_id)
        db.delete(record)
        db.commit()
        logger.info(f"Deleted {self.label.lower()} {record_id} from vehicle {vehicle_id}")

    def _fetch(self, db: Session, vehicle_id: str, record_id: str):
        record = (
            db.query(self.model)
            .filter(self.model.id == record_id, self.model.vehicle_id == vehicle_id)
            .first()
        )
        if record is None:
            raise NotFoundError(f"{self.label} not found")
        return record

    def _apply(self, record, changes: Dict[str, Any]) -> None:
        for field, value in changes.items():
            setattr(record, field, value)

    def _scope(self, query, **criteria: Any):
        return query

    def _ordering(self, **criteria: Any):
        return (self.model.date.desc(), self.model.id)
