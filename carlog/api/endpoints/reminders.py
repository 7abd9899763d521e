from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from carlog.api.deps import get_pagination, get_reminder_service
from carlog.core.security import get_current_user
from carlog.db.session import get_db
from carlog.models.reminder import ReminderFilter
from carlog.schemas.auth import TokenPayload
from carlog.schemas.reminder import ReminderCreate, ReminderOut, ReminderUpdate
from carlog.services.pagination import PaginationParams
from carlog.services.reminder_service import ReminderService

router = APIRouter()

def parse_filter(value: Optional[str]) -> ReminderFilter:
    """Unknown or missing filter values mean 'all'."""
    try:
        return ReminderFilter(value)
    except ValueError:
        return ReminderFilter.ALL

@router.get("/{vehicle_id}")
def list_reminders(
    vehicle_id: str,
    filter: Optional[str] = Query(None, description="active, completed or all"),
    pagination: PaginationParams = Depends(get_pagination),
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ReminderService = Depends(get_reminder_service),
):
    """
    List a vehicle's reminders.

    Active reminders come first. With ``filter=completed`` the most recently
    completed come first.
    """
    reminders, meta = service.list(
        db, current_user.user_id, vehicle_id, pagination, filter=parse_filter(filter)
    )
    return {
        "success": True,
        "data": {"reminders": [ReminderOut.model_validate(r) for r in reminders]},
        "pagination": meta,
    }

@router.get("/{vehicle_id}/{reminder_id}")
def get_reminder(
    vehicle_id: str,
    reminder_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ReminderService = Depends(get_reminder_service),
):
    reminder = service.get(db, current_user.user_id, vehicle_id, reminder_id)
    return {"success": True, "data": {"reminder": ReminderOut.model_validate(reminder)}}

@router.post("/{vehicle_id}", status_code=status.HTTP_201_CREATED)
def create_reminder(
    vehicle_id: str,
    payload: ReminderCreate,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ReminderService = Depends(get_reminder_service),
):
    """
    Create a reminder. ``date`` reminders need ``dueDate``, ``mileage``
    reminders need ``dueMileage``.
    """
    reminder = service.create(db, current_user.user_id, vehicle_id, payload)
    return {"success": True, "data": {"reminder": ReminderOut.model_validate(reminder)}}

@router.put("/{vehicle_id}/{reminder_id}")
def update_reminder(
    vehicle_id: str,
    reminder_id: str,
    payload: ReminderUpdate,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ReminderService = Depends(get_reminder_service),
):
    reminder = service.update(db, current_user.user_id, vehicle_id, reminder_id, payload)
    return {"success": True, "data": {"reminder": ReminderOut.model_validate(reminder)}}

@router.delete("/{vehicle_id}/{reminder_id}")
def delete_reminder(
    vehicle_id: str,
    reminder_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ReminderService = Depends(get_reminder_service),
):
    service.delete(db, current_user.user_id, vehicle_id, reminder_id)
    return {"success": True, "message": "Reminder deleted successfully"}

@router.post("/{vehicle_id}/{reminder_id}/complete")
def complete_reminder(
    vehicle_id: str,
    reminder_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ReminderService = Depends(get_reminder_service),
):
    """Mark a reminder as done. Completing it twice answers 409."""
    reminder = service.mark_completed(db, current_user.user_id, vehicle_id, reminder_id)
    return {
        "success": True,
        "data": {"reminder": ReminderOut.model_validate(reminder)},
        "message": "Reminder marked as completed",
    }

@router.post("/{vehicle_id}/{reminder_id}/incomplete")
def reopen_reminder(
    vehicle_id: str,
    reminder_id: str,
    current_user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: ReminderService = Depends(get_reminder_service),
):
    """Undo a completion. Reopening an open reminder answers 409."""
    reminder = service.mark_incomplete(db, current_user.user_id, vehicle_id, reminder_id)
    return {
        "success": True,
        "data": {"reminder": ReminderOut.model_validate(reminder)},
        "message": "Reminder marked as incomplete",
    }
