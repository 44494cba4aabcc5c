"""Reference data models: service catalog entries and their add-on extras."""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PricingCategory(str, Enum):
    """How a service type is priced."""

    ROOM_TALLY = "room_tally"
    BEDROOM_TIERED = "bedroom_tiered"
    QUOTE_BASED = "quote_based"
    STANDARD_HOURLY = "standard_hourly"


class ServiceCatalogEntry(BaseModel):
    """One bookable service type."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    base_hourly_rate: Decimal = Field(ge=0)
    minimum_duration_hours: float = Field(ge=0)
    minimum_notice_days: int = Field(ge=0)
    category: PricingCategory = PricingCategory.STANDARD_HOURLY

    @property
    def bedroom_based(self) -> bool:
        return self.category == PricingCategory.BEDROOM_TIERED

    @property
    def quote_based(self) -> bool:
        return self.category == PricingCategory.QUOTE_BASED


class ServiceExtra(BaseModel):
    """Optional add-on offered for a service type."""

    model_config = ConfigDict(frozen=True)

    id: int
    service_type: str
    name: str
    description: str = ""
    unit_price: Decimal = Field(ge=0)
    # Compact form such as "1hr 30mins" or "45mins"
    duration_text: Optional[str] = None
