"""
Customer reminder scheduling and dispatch.

Admins create a reminder per booking, by default ``reminder_lead_hours``
before the appointment. A periodic job calls ``process_pending_reminders``
with an async sender supplied by the mail collaborator; each due reminder
is marked sent or failed.
"""

import logging
from collections.abc import Awaitable
from datetime import datetime, timedelta
from typing import Callable, Optional

from cleanbook.config import settings
from cleanbook.notifications.messages import default_reminder_message
from cleanbook.schemas.booking_schema import Booking
from cleanbook.schemas.reminder_schema import CustomerReminder, ReminderStatus, ReminderType
from cleanbook.tools.booking import get_all_bookings, get_booking

logger = logging.getLogger(__name__)

ReminderSender = Callable[[Booking, str], Awaitable[bool]]

_reminders: dict[int, CustomerReminder] = {}
_next_id = 1


def booking_start(booking: Booking) -> datetime:
    """Local start time of a booking."""
    return datetime.strptime(f"{booking.booking_date} {booking.booking_time}", "%Y-%m-%d %H:%M")


def create_booking_reminder(
    booking_id: int,
    admin_id: int,
    custom_message: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Optional[CustomerReminder]:
    """Schedule a reminder ahead of a booking. Returns None if the booking is unknown."""
    global _next_id

    booking = get_booking(booking_id)
    if booking is None:
        logger.error("Cannot create reminder: booking %s not found", booking_id)
        return None

    lead = timedelta(hours=settings.scheduling.reminder_lead_hours)
    reminder = CustomerReminder(
        id=_next_id,
        booking_id=booking_id,
        reminder_type=ReminderType.CUSTOM if custom_message else ReminderType.DAY_BEFORE,
        message=custom_message or default_reminder_message(booking, settings.scheduling.reminder_lead_hours),
        scheduled_at=booking_start(booking) - lead,
        created_at=now or datetime.now(),
        created_by=admin_id,
    )
    _reminders[reminder.id] = reminder
    _next_id += 1
    logger.info("Reminder %d scheduled for booking %d at %s", reminder.id, booking_id, reminder.scheduled_at)
    return reminder


def create_missing_reminders(admin_id: int, now: Optional[datetime] = None) -> int:
    """Create reminders for future bookings that have none. Returns how many were created."""
    now = now or datetime.now()
    created = 0
    for booking in get_all_bookings():
        if get_reminders_for_booking(booking.id):
            continue
        if booking_start(booking) <= now:
            continue
        if create_booking_reminder(booking.id, admin_id, now=now):
            created += 1
    logger.info("Created %d missing reminders", created)
    return created


def _mark(reminder: CustomerReminder, status: ReminderStatus, sent_at: Optional[datetime] = None) -> None:
    _reminders[reminder.id] = reminder.model_copy(update={"status": status, "sent_at": sent_at})


async def process_pending_reminders(send: ReminderSender, now: Optional[datetime] = None) -> int:
    """Send every pending reminder that is due. Returns the number sent."""
    now = now or datetime.now()
    sent = 0
    for reminder in get_pending_reminders():
        if reminder.scheduled_at > now:
            continue

        booking = get_booking(reminder.booking_id)
        if booking is None:
            logger.error("Booking not found for reminder %d", reminder.id)
            _mark(reminder, ReminderStatus.FAILED)
            continue

        try:
            delivered = await send(booking, reminder.message)
        except Exception:
            logger.exception("Error sending reminder %d", reminder.id)
            delivered = False

        if delivered:
            _mark(reminder, ReminderStatus.SENT, sent_at=now)
            sent += 1
            logger.info("Reminder sent for booking %d", booking.id)
        else:
            _mark(reminder, ReminderStatus.FAILED)
            logger.error("Failed to send reminder for booking %d", booking.id)
    return sent


def get_reminder(reminder_id: int) -> Optional[CustomerReminder]:
    return _reminders.get(reminder_id)


def get_reminders_for_booking(booking_id: int) -> list[CustomerReminder]:
    return [r for r in _reminders.values() if r.booking_id == booking_id]


def get_pending_reminders() -> list[CustomerReminder]:
    return [r for r in _reminders.values() if r.status == ReminderStatus.PENDING]


def get_all_reminders() -> list[CustomerReminder]:
    return list(_reminders.values())


def reset() -> None:
    """Clear all reminders. Used by test fixtures for isolation."""
    global _next_id
    _reminders.clear()
    _next_id = 1
