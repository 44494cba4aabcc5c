"""Customer reminder records managed from the admin panel."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ReminderType(str, Enum):
    DAY_BEFORE = "24_hour"
    CUSTOM = "custom"


class ReminderStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"


class CustomerReminder(BaseModel):
    """A reminder scheduled for one booking."""

    id: int
    booking_id: int
    reminder_type: ReminderType = ReminderType.DAY_BEFORE
    message: str
    scheduled_at: datetime
    sent_at: Optional[datetime] = None
    status: ReminderStatus = ReminderStatus.PENDING
    created_at: datetime
    created_by: int
