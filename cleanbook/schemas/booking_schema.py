"""Booking draft, price breakdown, persisted booking, and conflict models."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from cleanbook.utils import format_money


class TipKind(str, Enum):
    PERCENTAGE = "percentage"
    CUSTOM = "custom"


class TipSpec(BaseModel):
    """Either a named percentage (0/10/15/20) or a custom flat amount.

    ``custom_amount`` stays free text because it is typed by the customer
    and may be mid-edit when the price is recomputed.
    """

    model_config = ConfigDict(frozen=True)

    kind: TipKind = TipKind.PERCENTAGE
    percentage: int = 0
    custom_amount: str = ""

    @classmethod
    def percent(cls, value: int) -> "TipSpec":
        return cls(kind=TipKind.PERCENTAGE, percentage=value)

    @classmethod
    def custom(cls, amount: str) -> "TipSpec":
        return cls(kind=TipKind.CUSTOM, custom_amount=str(amount))


class SelectedExtra(BaseModel):
    """An add-on chosen by the customer, with a quantity."""

    model_config = ConfigDict(frozen=True)

    extra_id: int
    quantity: int = Field(default=1, ge=1)
    # Price shown when the extra was picked; used only if the catalog no longer has it
    unit_price: Optional[Decimal] = Field(default=None, ge=0)


class BookingDraft(BaseModel):
    """In-progress booking covering the fields of every service type.

    Which fields matter depends on ``service_type``: room counts drive
    deep and end-of-tenancy cleans, ``bedrooms`` alone drives short-stay
    turnovers, ``duration`` drives hourly services, and the surface and
    quote fields describe quote-based work.
    """

    service_type: str = ""
    frequency: str = "one-time"
    duration: float = Field(default=2, ge=0)

    bedrooms: int = Field(default=1, ge=0)
    bathrooms: int = Field(default=1, ge=0)
    toilets: int = Field(default=0, ge=0)
    living_rooms: int = Field(default=1, ge=0)
    kitchen: int = Field(default=1, ge=0)
    utility_room: int = Field(default=0, ge=0)
    carpet_cleaning_areas: int = Field(default=0, ge=0)

    square_footage: int = Field(default=0, ge=0)
    property_type: str = ""
    property_status: str = ""
    surface_type: str = ""
    surface_material: str = ""
    quote_request: str = ""
    special_instructions: str = ""

    booking_date: str = ""
    booking_time: str = ""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    postcode: str = ""

    sms_reminders: bool = False
    notify_more_time: bool = False

    tip: TipSpec = Field(default_factory=TipSpec)
    selected_extras: list[SelectedExtra] = Field(default_factory=list)


class PriceBreakdown(BaseModel):
    """Derived price and duration for a draft. Money in pounds, time in minutes."""

    model_config = ConfigDict(frozen=True)

    base_price: Decimal = Decimal("0")
    base_duration_minutes: int = 0
    extras_total: Decimal = Decimal("0")
    extras_duration_minutes: int = 0
    tip_amount: Decimal = Decimal("0")
    subtotal: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    total_duration_minutes: int = 0
    quote_based: bool = False

    def as_strings(self) -> dict[str, str]:
        """Money fields as fixed two-decimal strings, as stored on a Booking."""
        return {
            "base_price": format_money(self.base_price),
            "extras_total": format_money(self.extras_total),
            "tip_amount": format_money(self.tip_amount),
            "subtotal": format_money(self.subtotal),
            "total_price": format_money(self.total),
        }


class Booking(BookingDraft):
    """A submitted booking with its frozen price. Never updated after creation.

    ``duration`` holds the scheduled hours used for calendar conflict checks.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    base_price: str
    extras_total: str = "0.00"
    tip_amount: str = "0.00"
    total_price: str
    total_duration_minutes: int = 0
    quote_based: bool = False
    created_at: Optional[datetime] = None


class ConflictPair(BaseModel):
    """Two same-day bookings whose time windows overlap."""

    model_config = ConfigDict(frozen=True)

    booking_a: Booking
    booking_b: Booking
    overlap_minutes: int
