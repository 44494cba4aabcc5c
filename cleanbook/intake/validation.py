"""
Submission boundary: checks a draft before it is priced and stored.

The pricing engine tolerates half-filled drafts; a submission must not.
``validate_draft`` collects every problem and raises a single
BookingValidationError, or returns a normalized copy of the draft.
"""

import logging
import math
import re
from datetime import date, datetime
from typing import Optional

from cleanbook.config import settings
from cleanbook.schemas.booking_schema import BookingDraft
from cleanbook.schemas.catalog_schema import PricingCategory
from cleanbook.tools.services import FREQUENCY_OPTIONS, earliest_booking_date, get_service
from cleanbook.utils import normalize_phone

logger = logging.getLogger(__name__)

# Validation thresholds
MIN_NAME_LENGTH = 2
MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15
MIN_ADDRESS_LENGTH = 3

REQUIRED_FIELDS: list[tuple[str, str]] = [
    ("full_name", "full name"),
    ("email", "email"),
    ("phone", "phone number"),
    ("address1", "address"),
    ("city", "city"),
    ("postcode", "postcode"),
    ("booking_date", "booking date"),
    ("booking_time", "booking time"),
]

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class BookingValidationError(Exception):
    """Raised when a submitted draft cannot become a booking."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Validation error: " + "; ".join(errors))


def _validate_phone(value: str) -> bool:
    digits = re.sub(r"[^\d]", "", value)
    return MIN_PHONE_DIGITS <= len(digits) <= MAX_PHONE_DIGITS


def _parse_date(value: str) -> Optional[date]:
    """Parse YYYY-MM-DD, or None."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def _validate_time(value: str) -> bool:
    """Validate time is in HH:MM format."""
    if not re.fullmatch(r"\d{2}:\d{2}", value.strip()):
        return False
    try:
        datetime.strptime(value.strip(), "%H:%M")
        return True
    except ValueError:
        return False


def validate_draft(draft: BookingDraft, today: Optional[date] = None) -> BookingDraft:
    """
    Check a draft is complete and bookable.

    Returns:
        A copy of the draft with stripped text, lower-case service key,
        and a normalized phone number.

    Raises:
        BookingValidationError: listing every problem found.
    """
    today = today or date.today()
    errors: list[str] = []

    service = get_service(draft.service_type)
    if service is None:
        errors.append(f"Unknown service type: {draft.service_type!r}.")

    for field_name, display_name in REQUIRED_FIELDS:
        if not str(getattr(draft, field_name) or "").strip():
            errors.append(f"Missing {display_name}.")

    if draft.full_name.strip() and len(draft.full_name.strip()) < MIN_NAME_LENGTH:
        errors.append(f"Full name '{draft.full_name}' is too short.")
    if draft.email.strip() and not _EMAIL_RE.match(draft.email.strip()):
        errors.append(f"Email '{draft.email}' doesn't look right.")
    if draft.phone.strip() and not _validate_phone(draft.phone):
        errors.append(f"Phone number '{draft.phone}' doesn't look right.")
    if draft.address1.strip() and len(draft.address1.strip()) < MIN_ADDRESS_LENGTH:
        errors.append(f"Address '{draft.address1}' is too short.")

    if draft.frequency.strip().lower() not in FREQUENCY_OPTIONS:
        errors.append(f"Frequency '{draft.frequency}' must be one of: {', '.join(FREQUENCY_OPTIONS)}.")

    if draft.booking_time.strip() and not _validate_time(draft.booking_time):
        errors.append(f"Booking time '{draft.booking_time}' must be HH:MM.")

    booking_date = _parse_date(draft.booking_date) if draft.booking_date.strip() else None
    if draft.booking_date.strip() and booking_date is None:
        errors.append(f"Booking date '{draft.booking_date}' must be YYYY-MM-DD.")

    if service is not None and booking_date is not None and settings.scheduling.enforce_minimum_notice:
        earliest = earliest_booking_date(service.key, today)
        if booking_date < earliest:
            errors.append(
                f"{service.name} needs {service.minimum_notice_days} days notice; "
                f"earliest date is {earliest.isoformat()}."
            )

    if service is not None and service.category == PricingCategory.STANDARD_HOURLY:
        if not math.isfinite(draft.duration):
            errors.append(f"Duration {draft.duration} is not a number of hours.")
        elif (draft.duration * 2) != int(draft.duration * 2):
            errors.append(f"Duration {draft.duration} must be in half-hour steps.")
        elif settings.scheduling.enforce_minimum_duration and draft.duration < service.minimum_duration_hours:
            errors.append(
                f"{service.name} is booked for at least {service.minimum_duration_hours:g} hours."
            )
        elif draft.duration > settings.scheduling.max_duration_hours:
            errors.append(
                f"Duration {draft.duration:g} exceeds {settings.scheduling.max_duration_hours:g} hours."
            )

    if errors:
        logger.info("Draft rejected with %d errors", len(errors))
        raise BookingValidationError(errors)

    cleaned = {
        name: value.strip()
        for name, value in draft.model_dump().items()
        if isinstance(value, str)
    }
    cleaned["service_type"] = service.key
    cleaned["phone"] = normalize_phone(draft.phone)
    cleaned["frequency"] = draft.frequency.strip().lower()
    return draft.model_copy(update=cleaned)
