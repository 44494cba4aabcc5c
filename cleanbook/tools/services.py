"""Service catalog with hourly rates, minimum durations, and notice periods."""

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from cleanbook.schemas.catalog_schema import PricingCategory, ServiceCatalogEntry

logger = logging.getLogger(__name__)

DEFAULT_NOTICE_DAYS = 2

SERVICE_CATALOG: dict[str, ServiceCatalogEntry] = {
    entry.key: entry
    for entry in [
        ServiceCatalogEntry(
            key="general",
            name="General / Standard Cleaning",
            base_hourly_rate=Decimal("20"),
            minimum_duration_hours=2,
            minimum_notice_days=2,
            category=PricingCategory.STANDARD_HOURLY,
        ),
        ServiceCatalogEntry(
            key="deep",
            name="Deep Cleaning",
            base_hourly_rate=Decimal("30"),
            minimum_duration_hours=3,
            minimum_notice_days=3,
            category=PricingCategory.ROOM_TALLY,
        ),
        ServiceCatalogEntry(
            key="tenancy",
            name="End of Tenancy Cleaning",
            base_hourly_rate=Decimal("30"),
            minimum_duration_hours=4,
            minimum_notice_days=7,
            category=PricingCategory.ROOM_TALLY,
        ),
        ServiceCatalogEntry(
            key="airbnb",
            name="AirBnB Cleaning",
            base_hourly_rate=Decimal("20"),
            minimum_duration_hours=2,
            minimum_notice_days=1,
            category=PricingCategory.BEDROOM_TIERED,
        ),
        ServiceCatalogEntry(
            key="jet",
            name="Jet Washing / Garden Cleaning",
            base_hourly_rate=Decimal("0"),
            minimum_duration_hours=2,
            minimum_notice_days=2,
            category=PricingCategory.QUOTE_BASED,
        ),
        ServiceCatalogEntry(
            key="commercial",
            name="Commercial Cleaning",
            base_hourly_rate=Decimal("0"),
            minimum_duration_hours=3,
            minimum_notice_days=3,
            category=PricingCategory.QUOTE_BASED,
        ),
    ]
}

FREQUENCY_OPTIONS: list[str] = ["one-time", "weekly", "fortnightly", "monthly"]


def get_service(service_type: Optional[str]) -> Optional[ServiceCatalogEntry]:
    """Look up a catalog entry. Returns None for unknown or empty keys."""
    if not service_type:
        return None
    return SERVICE_CATALOG.get(service_type.strip().lower())


def get_service_name(service_type: str) -> str:
    """Display name for a service type, falling back to the raw key."""
    entry = get_service(service_type)
    return entry.name if entry else service_type


def get_all_services() -> list[dict]:
    """Return all services with basic info."""
    return [
        {
            "id": key,
            "name": entry.name,
            "hourly_rate": str(entry.base_hourly_rate),
            "quote_based": entry.quote_based,
        }
        for key, entry in SERVICE_CATALOG.items()
    ]


def earliest_booking_date(service_type: str, today: Optional[date] = None) -> date:
    """First date a service may be booked for, honouring its notice period."""
    today = today or date.today()
    entry = get_service(service_type)
    notice = entry.minimum_notice_days if entry else DEFAULT_NOTICE_DAYS
    return today + timedelta(days=notice)
