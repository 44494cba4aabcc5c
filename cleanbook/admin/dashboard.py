"""Admin booking list: filtering and headline figures."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from cleanbook.schemas.booking_schema import Booking, ConflictPair
from cleanbook.scheduling.conflicts import conflicting_booking_ids, find_conflicts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSummary:
    """Counts shown above the admin booking table."""

    total_bookings: int
    todays_bookings: int
    conflict_count: int
    revenue: Decimal


def _matches_search(booking: Booking, term: str) -> bool:
    lower = term.lower()
    return (
        lower in booking.full_name.lower()
        or lower in booking.email.lower()
        or term in booking.phone
    )


def filter_bookings(
    bookings: list[Booking],
    search: str = "",
    booking_date: str = "",
    service: str = "",
    status: str = "all",
    conflicts: Optional[list[ConflictPair]] = None,
) -> list[Booking]:
    """Apply the admin list filters. ``status="conflicts"`` keeps only clashing bookings."""
    conflict_ids: set[int] = set()
    if status == "conflicts":
        if conflicts is None:
            conflicts = find_conflicts(bookings)
        conflict_ids = conflicting_booking_ids(conflicts)

    results = []
    for booking in bookings:
        if search and not _matches_search(booking, search):
            continue
        if booking_date and booking.booking_date != booking_date:
            continue
        if service and service != "all" and booking.service_type != service:
            continue
        if status == "conflicts" and booking.id not in conflict_ids:
            continue
        results.append(booking)
    return results


def _price(value: str) -> Decimal:
    try:
        return Decimal(value or "0")
    except InvalidOperation:
        logger.warning("Unreadable stored price %r", value)
        return Decimal("0")


def summarize(
    bookings: list[Booking],
    today: Optional[date] = None,
    conflicts: Optional[list[ConflictPair]] = None,
) -> DashboardSummary:
    today = today or date.today()
    if conflicts is None:
        conflicts = find_conflicts(bookings)
    return DashboardSummary(
        total_bookings=len(bookings),
        todays_bookings=sum(1 for b in bookings if b.booking_date == today.isoformat()),
        conflict_count=len(conflicts),
        revenue=sum((_price(b.total_price) for b in bookings), Decimal("0")),
    )
