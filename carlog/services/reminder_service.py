import logging
from datetime import datetime
from typing import Any, Dict

from sqlalchemy.orm import Session

from carlog.core.errors import ConflictError, ValidationError
from carlog.models.reminder import Reminder, ReminderFilter, ReminderType
from carlog.services.ownership import require_vehicle_owner
from carlog.services.vehicle_records import VehicleRecordService

logger = logging.getLogger(__name__)

class ReminderService(VehicleRecordService):
    """
    Reminders, with an active/completed filter on listing and guarded
    completion transitions.
    """
    model = Reminder
    label = "Reminder"

    def update(self, db: Session, user_id: str, vehicle_id: str, record_id: str, data):
        require_vehicle_owner(db, user_id, vehicle_id)
        reminder = self._fetch(db, vehicle_id, record_id)
        self._apply(reminder, data.model_dump(exclude_unset=True))

        # The patch may switch the type without supplying its due field
        if reminder.type == ReminderType.DATE and reminder.due_date is None:
            db.rollback()
            raise ValidationError("dueDate is required for date-type reminders")
        if reminder.type == ReminderType.MILEAGE and reminder.due_mileage is None:
            db.rollback()
            raise ValidationError("dueMileage is required for mileage-type reminders")

        db.commit()
        db.refresh(reminder)
        return reminder

    def mark_completed(self, db: Session, user_id: str, vehicle_id: str, record_id: str) -> Reminder:
        require_vehicle_owner(db, user_id, vehicle_id)
        reminder = self._fetch(db, vehicle_id, record_id)
        if reminder.is_completed:
            raise ConflictError("Reminder is already completed")

        reminder.is_completed = True
        reminder.completed_at = datetime.utcnow()
        db.commit()
        db.refresh(reminder)
        logger.info(f"Reminder {record_id} completed")
        return reminder

    def mark_incomplete(self, db: Session, user_id: str, vehicle_id: str, record_id: str) -> Reminder:
        require_vehicle_owner(db, user_id, vehicle_id)
        reminder = self._fetch(db, vehicle_id, record_id)
        if not reminder.is_completed:
            raise ConflictError("Reminder is not completed")

        reminder.is_completed = False
        reminder.completed_at = None
        db.commit()
        db.refresh(reminder)
        logger.info(f"Reminder {record_id} reopened")
        return reminder

    def _apply(self, reminder: Reminder, changes: Dict[str, Any]) -> None:
        is_completed = changes.pop("is_completed", None)
        super()._apply(reminder, changes)
        if is_completed is True:
            reminder.is_completed = True
            if reminder.completed_at is None:
                reminder.completed_at = datetime.utcnow()
        elif is_completed is False:
            reminder.is_completed = False
            reminder.completed_at = None

    def _scope(self, query, filter: ReminderFilter = ReminderFilter.ALL, **criteria: Any):
        if filter == ReminderFilter.ACTIVE:
            return query.filter(Reminder.is_completed.is_(False))
        if filter == ReminderFilter.COMPLETED:
            return query.filter(Reminder.is_completed.is_(True))
        return query

    def _ordering(self, filter: ReminderFilter = ReminderFilter.ALL, **criteria: Any):
        if filter == ReminderFilter.COMPLETED:
            return (Reminder.completed_at.desc(), Reminder.id)
        # Active reminders first, newest first
        return (Reminder.is_completed.asc(), Reminder.created_at.desc(), Reminder.id)
