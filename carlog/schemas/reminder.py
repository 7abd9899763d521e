from typing import Annotated, Optional
from pydantic import Field, StringConstraints, model_validator

from carlog.models.reminder import ReminderType
from carlog.schemas.common import CamelModel, Mileage, PatchModel, UtcDatetime, UtcTimestamp

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
Notes = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

class ReminderCreate(CamelModel):
    """
    Schema for creating a reminder.

    A ``date`` reminder needs ``dueDate``; a ``mileage`` reminder needs
    ``dueMileage``.
    """
    title: Title
    type: ReminderType = Field(..., description="'date' or 'mileage'")
    due_date: Optional[UtcDatetime] = None
    due_mileage: Optional[Mileage] = None
    notes: Optional[Notes] = None

    @model_validator(mode="after")
    def check_due_field(self):
        if self.type == ReminderType.DATE and self.due_date is None:
            raise ValueError("dueDate is required for date-type reminders")
        if self.type == ReminderType.MILEAGE and self.due_mileage is None:
            raise ValueError("dueMileage is required for mileage-type reminders")
        return self

class ReminderUpdate(PatchModel):
    """Schema for updating a reminder. All fields optional."""
    title: Optional[Title] = None
    type: Optional[ReminderType] = None
    due_date: Optional[UtcDatetime] = None
    due_mileage: Optional[Mileage] = None
    is_completed: Optional[bool] = None
    notes: Optional[Notes] = None

    non_nullable = ("title", "type", "is_completed")

class ReminderOut(CamelModel):
    id: str
    vehicle_id: str
    title: str
    type: ReminderType
    due_date: Optional[UtcTimestamp] = None
    due_mileage: Optional[int] = None
    is_completed: bool
    completed_at: Optional[UtcTimestamp] = None
    notes: Optional[str] = None
    created_at: UtcTimestamp
    updated_at: UtcTimestamp
