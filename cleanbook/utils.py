"""Shared utilities used across the booking core."""

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

PENNY = Decimal("0.01")


def normalize_phone(value: str) -> str:
    """Normalize a phone number by stripping everything except digits and a leading +.

    Examples:
        >>> normalize_phone("07700 900 123")
        '07700900123'
        >>> normalize_phone("+44 (7700) 900-123")
        '+447700900123'
    """
    value = value.strip()
    if value.startswith("+"):
        return "+" + re.sub(r"[^\d]", "", value[1:])
    return re.sub(r"[^\d]", "", value)


def parse_time_to_minutes(value: str) -> int:
    """Convert an "HH:MM" 24-hour string to minutes since midnight.

    Assumes a well-formed value; callers validate at the intake boundary.
    """
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def format_time_12h(value: str) -> str:
    """Render "HH:MM" as a 12-hour clock string.

    Examples:
        >>> format_time_12h("13:30")
        '1:30 PM'
        >>> format_time_12h("00:15")
        '12:15 AM'
    """
    hours, minutes = value.split(":")
    hour = int(hours)
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minutes} {suffix}"


def to_money(value: Decimal) -> Decimal:
    """Quantize a Decimal amount to pence.

    Precision widens to fit the amount, so very large values round
    instead of raising InvalidOperation.
    """
    with localcontext() as ctx:
        if value.is_finite():
            ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(PENNY, rounding=ROUND_HALF_UP)


def money_sum(*amounts: Decimal) -> Decimal:
    """Add amounts exactly and quantize the result to pence."""
    with localcontext() as ctx:
        ctx.prec = max([ctx.prec] + [amount.adjusted() + 4 for amount in amounts if amount.is_finite()])
        return to_money(sum(amounts, Decimal(0)))


def format_money(value: Decimal) -> str:
    """Render an amount as a fixed two-decimal string."""
    return str(to_money(value))
