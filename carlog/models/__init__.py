"""
Import all models so they are registered on the declarative Base.
"""

from carlog.models.user import User
from carlog.models.vehicle import Vehicle
from carlog.models.logs import FuelLog, ServiceLog
from carlog.models.reminder import Reminder, ReminderFilter, ReminderType

# Export all models
__all__ = [
    "User",
    "Vehicle",
    "FuelLog",
    "ServiceLog",
    "Reminder",
    "ReminderFilter",
    "ReminderType",
]
