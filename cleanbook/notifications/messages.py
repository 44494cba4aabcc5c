"""
Plain-text message bodies for booking confirmations and reminders.

Delivery (SMTP, templates, PDF receipts) belongs to the mail collaborator;
these functions only decide what the customer and owner are told.
"""

from datetime import datetime
from typing import Optional

from cleanbook.config import settings
from cleanbook.schemas.booking_schema import Booking
from cleanbook.tools.services import get_service_name
from cleanbook.utils import format_time_12h


def format_booking_date(value: str) -> str:
    """Render "2025-03-18" as "Tuesday 18 March 2025"."""
    parsed = datetime.strptime(value, "%Y-%m-%d")
    return f"{parsed.strftime('%A')} {parsed.day} {parsed.strftime('%B %Y')}"


def _price_line(booking: Booking) -> str:
    symbol = settings.business.currency_symbol
    if booking.quote_based:
        return (
            f"Extras: {symbol}{booking.extras_total}. "
            "Your final price will follow once we have reviewed your quote request."
        )
    return f"Total: {symbol}{booking.total_price}"


def customer_confirmation(booking: Booking) -> str:
    """Confirmation sent to the customer after a booking is created."""
    lines = [
        f"Hi {booking.full_name},",
        "",
        f"Thank you for booking with {settings.business.name}.",
        f"Booking reference: #{booking.id}",
        f"Service: {get_service_name(booking.service_type)}",
        f"When: {format_booking_date(booking.booking_date)} at {format_time_12h(booking.booking_time)}",
        f"Where: {booking.address1}, {booking.city} {booking.postcode}",
        _price_line(booking),
        "",
        f"Questions? Call us on {settings.business.phone}.",
    ]
    return "\n".join(lines)


def owner_notification(booking: Booking) -> str:
    """Summary sent to the business owner for each new booking."""
    lines = [
        f"New booking #{booking.id}: {get_service_name(booking.service_type)}",
        f"Customer: {booking.full_name} ({booking.email}, {booking.phone})",
        f"Date: {booking.booking_date} {booking.booking_time} for {booking.duration:g} hours",
        _price_line(booking),
    ]
    if booking.special_instructions:
        lines.append(f"Instructions: {booking.special_instructions}")
    if booking.quote_request:
        lines.append(f"Quote request: {booking.quote_request}")
    return "\n".join(lines)


def _when(booking: Booking, lead_hours: int) -> str:
    if lead_hours == 24:
        return "tomorrow"
    return format_booking_date(booking.booking_date)


def default_reminder_message(booking: Booking, lead_hours: Optional[int] = None) -> str:
    """Reminder text used when the admin does not supply one.

    Says "tomorrow" only for the standard day-before reminder; other lead
    times name the booking date.
    """
    if lead_hours is None:
        lead_hours = settings.scheduling.reminder_lead_hours
    return (
        f"This is a friendly reminder that your {get_service_name(booking.service_type)} "
        f"appointment is scheduled for {_when(booking, lead_hours)} at {format_time_12h(booking.booking_time)}. "
        "We look forward to providing you with excellent service!"
    )
