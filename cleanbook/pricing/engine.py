"""
Pricing engine: maps a booking draft and its extras to a price breakdown.

The engine is called on every form change to drive the live summary, so it
never raises. Unknown service types price at zero, and missing or malformed
numbers (room counts, extra durations, custom tips) are read as zero.

Each service type carries a PricingCategory; the base price comes from the
function registered for that category in ``_BASE_PRICERS``:

    ROOM_TALLY       additive per-room price and time, floored at £60 / 2 hours
    BEDROOM_TIERED   (bedrooms + 1) hours at the hourly rate
    QUOTE_BASED      no base price, extras only, no tip
    STANDARD_HOURLY  hourly rate x booked hours
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, NamedTuple, Optional

from cleanbook.schemas.booking_schema import BookingDraft, PriceBreakdown, TipKind, TipSpec
from cleanbook.schemas.catalog_schema import PricingCategory, ServiceCatalogEntry, ServiceExtra
from cleanbook.tools.services import get_service
from cleanbook.utils import money_sum, to_money

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

ROOM_TALLY_MIN_PRICE = Decimal("60")
ROOM_TALLY_MIN_MINUTES = 120

ALLOWED_TIP_PERCENTAGES = frozenset({0, 10, 15, 20})

# Customer-entered amounts above this are treated as typos
MAX_ENTERED_AMOUNT = Decimal("100000")

_HOURS_RE = re.compile(r"(\d+)\s*hrs?", re.IGNORECASE)
_MINUTES_RE = re.compile(r"(\d+)\s*mins?", re.IGNORECASE)


class RoomRate(NamedTuple):
    price: Decimal
    minutes: int


# Draft attribute -> price and time per room
ROOM_RATES: dict[str, RoomRate] = {
    "bedrooms": RoomRate(Decimal("20"), 60),
    "bathrooms": RoomRate(Decimal("25"), 60),
    "toilets": RoomRate(Decimal("15"), 30),
    "living_rooms": RoomRate(Decimal("25"), 60),
    "kitchen": RoomRate(Decimal("25"), 60),
    "utility_room": RoomRate(Decimal("15"), 30),
    "carpet_cleaning_areas": RoomRate(Decimal("35"), 60),
}


class BasePrice(NamedTuple):
    price: Decimal
    minutes: int


class ExtrasTally(NamedTuple):
    total: Decimal
    minutes: int


def _count(value: Any, default: int = 0) -> int:
    """Read a room count leniently; anything unusable becomes ``default``."""
    if value is None or value == "":
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return max(parsed, 0)


def _hours(value: Any) -> Decimal:
    """Read a booked duration in hours; missing or zero means one hour."""
    try:
        hours = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("1")
    if not hours.is_finite() or hours <= 0:
        return Decimal("1")
    return hours


def _to_minutes(hours: Decimal) -> int:
    return int(hours * 60)


def parse_duration_text(text: Optional[str]) -> int:
    """Parse compact duration text such as "1hr 30mins" into minutes.

    Hours and minutes parts are both optional; anything unparseable is 0.

    Examples:
        >>> parse_duration_text("1hr 30mins")
        90
        >>> parse_duration_text("45mins")
        45
        >>> parse_duration_text("soon")
        0
    """
    if not text:
        return 0
    minutes = 0
    hours_match = _HOURS_RE.search(text)
    if hours_match:
        minutes += int(hours_match.group(1)) * 60
    minutes_match = _MINUTES_RE.search(text)
    if minutes_match:
        minutes += int(minutes_match.group(1))
    return minutes


def parse_amount(raw: Any) -> Decimal:
    """Parse a customer-entered amount.

    Non-numeric, negative, or implausibly large input is 0.
    """
    if raw is None:
        return ZERO
    cleaned = str(raw).strip().lstrip("£").replace(",", "")
    if not cleaned:
        return ZERO
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return ZERO
    if not amount.is_finite() or amount < 0:
        return ZERO
    if amount > MAX_ENTERED_AMOUNT:
        logger.debug("Ignoring entered amount above %s", MAX_ENTERED_AMOUNT)
        return ZERO
    return amount


def resolve_tip(tip: Optional[TipSpec], subtotal: Decimal) -> Decimal:
    """Tip amount for a subtotal.

    A custom tip is a flat amount and ignores the subtotal. A percentage tip
    scales with it; percentages outside 0/10/15/20 give no tip.
    """
    if tip is None:
        return ZERO
    if tip.kind == TipKind.CUSTOM:
        return parse_amount(tip.custom_amount)
    if tip.percentage not in ALLOWED_TIP_PERCENTAGES:
        logger.debug("Ignoring unsupported tip percentage %s", tip.percentage)
        return ZERO
    return subtotal * tip.percentage / 100


def tally_extras(draft: BookingDraft, extras_catalog: list[ServiceExtra]) -> ExtrasTally:
    """Sum price and time for the selected extras, multiplied by quantity."""
    by_id = {extra.id: extra for extra in extras_catalog}
    total = ZERO
    minutes = 0
    for selection in draft.selected_extras or []:
        quantity = _count(selection.quantity, default=1) or 1
        extra = by_id.get(selection.extra_id)
        if extra is None:
            # Unknown to the catalog: keep the price the customer saw, no time
            total += (selection.unit_price or ZERO) * quantity
            continue
        total += extra.unit_price * quantity
        minutes += parse_duration_text(extra.duration_text) * quantity
    return ExtrasTally(total=total, minutes=minutes)


def _room_tally(draft: BookingDraft, service: ServiceCatalogEntry) -> BasePrice:
    price = ZERO
    minutes = 0
    for attribute, rate in ROOM_RATES.items():
        rooms = _count(getattr(draft, attribute, 0))
        price += rate.price * rooms
        minutes += rate.minutes * rooms
    # Floors apply independently
    return BasePrice(max(price, ROOM_TALLY_MIN_PRICE), max(minutes, ROOM_TALLY_MIN_MINUTES))


def _bedroom_tiered(draft: BookingDraft, service: ServiceCatalogEntry) -> BasePrice:
    hours = _count(draft.bedrooms, default=1) + 1
    return BasePrice(service.base_hourly_rate * hours, hours * 60)


def _quote_based(draft: BookingDraft, service: ServiceCatalogEntry) -> BasePrice:
    return BasePrice(ZERO, 0)


def _standard_hourly(draft: BookingDraft, service: ServiceCatalogEntry) -> BasePrice:
    hours = _hours(draft.duration)
    return BasePrice(service.base_hourly_rate * hours, _to_minutes(hours))


_BASE_PRICERS: dict[PricingCategory, Callable[[BookingDraft, ServiceCatalogEntry], BasePrice]] = {
    PricingCategory.ROOM_TALLY: _room_tally,
    PricingCategory.BEDROOM_TIERED: _bedroom_tiered,
    PricingCategory.QUOTE_BASED: _quote_based,
    PricingCategory.STANDARD_HOURLY: _standard_hourly,
}


def compute_pricing(
    draft: BookingDraft, extras_catalog: Optional[list[ServiceExtra]] = None
) -> PriceBreakdown:
    """Compute the price and duration breakdown for a draft.

    Args:
        draft: The booking draft as it currently stands.
        extras_catalog: Extras offered for the draft's service type.

    Returns:
        A PriceBreakdown with money quantized to pence. Frequency does not
        affect the price.
    """
    service = get_service(draft.service_type)
    if service is None:
        return PriceBreakdown()

    base = _BASE_PRICERS[service.category](draft, service)
    extras = tally_extras(draft, extras_catalog or [])

    if service.quote_based:
        extras_total = to_money(extras.total)
        return PriceBreakdown(
            extras_total=extras_total,
            extras_duration_minutes=extras.minutes,
            subtotal=extras_total,
            total=extras_total,
            total_duration_minutes=extras.minutes,
            quote_based=True,
        )

    subtotal = money_sum(base.price, extras.total)
    tip_amount = to_money(resolve_tip(draft.tip, subtotal))
    return PriceBreakdown(
        base_price=to_money(base.price),
        base_duration_minutes=base.minutes,
        extras_total=to_money(extras.total),
        extras_duration_minutes=extras.minutes,
        tip_amount=tip_amount,
        subtotal=subtotal,
        total=money_sum(subtotal, tip_amount),
        total_duration_minutes=base.minutes + extras.minutes,
    )
