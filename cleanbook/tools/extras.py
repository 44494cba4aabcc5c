"""
Service extras catalog.

In production this is read from the service_extras table; here it is the
seeded price list, grouped by service type.
"""

import logging
from decimal import Decimal
from typing import Optional

from cleanbook.schemas.catalog_schema import ServiceExtra

logger = logging.getLogger(__name__)

# (service_type, name, description, price, duration)
_SEED: list[tuple[str, str, str, str, Optional[str]]] = [
    ("general", "Oven Cleaning", "Deep clean inside and outside of oven", "25", "1hr"),
    ("general", "Fridge Cleaning", "Inside and outside fridge cleaning", "20", "30mins"),
    ("general", "Interior Windows", "Clean interior windows and sills", "15", "30mins"),
    ("general", "Inside Cupboards", "Clean inside kitchen cupboards", "30", "1hr"),
    ("deep", "Oven Deep Clean", "Intensive oven cleaning with degreasing", "35", "1hr 30mins"),
    ("deep", "Carpet Deep Clean", "Professional carpet cleaning", "40", "1hr"),
    ("deep", "Window Deep Clean", "Interior and exterior window cleaning", "25", "45mins"),
    ("deep", "Appliance Deep Clean", "All kitchen appliances cleaned", "45", "1hr 30mins"),
    ("tenancy", "Oven Professional Clean", "Guaranteed oven cleaning for deposit", "50", "1hr 30mins"),
    ("tenancy", "Carpet Professional Clean", "Professional carpet cleaning for deposit", "60", "2hr"),
    ("tenancy", "Wall Washing", "Clean walls and remove marks", "40", "1hr"),
    ("tenancy", "Garage/Shed Clean", "Clean garage or shed areas", "30", "1hr"),
    ("airbnb", "Linen Change", "Fresh linen and towels provided", "20", "30mins"),
    ("airbnb", "Welcome Pack Setup", "Setup welcome amenities", "15", "15mins"),
    ("airbnb", "Key Management", "Handle guest key exchange", "10", None),
    ("airbnb", "Inventory Check", "Check and report inventory status", "12", "20mins"),
    ("jet", "Driveway Sealing", "Apply protective sealant after cleaning", "80", None),
    ("jet", "Moss Treatment", "Remove and treat moss growth", "35", None),
    ("jet", "Gutter Cleaning", "Clean gutters and downspouts", "45", None),
    ("jet", "Patio Furniture Clean", "Clean outdoor furniture", "25", None),
    ("commercial", "Floor Waxing", "Professional floor waxing service", "100", None),
    ("commercial", "Carpet Cleaning", "Commercial carpet cleaning", "80", None),
    ("commercial", "Window Cleaning", "Interior and exterior commercial windows", "60", None),
    ("commercial", "Disinfection Service", "Full disinfection of premises", "120", None),
]

SERVICE_EXTRAS: list[ServiceExtra] = [
    ServiceExtra(
        id=index,
        service_type=service_type,
        name=name,
        description=description,
        unit_price=Decimal(price),
        duration_text=duration,
    )
    for index, (service_type, name, description, price, duration) in enumerate(_SEED, start=1)
]


def get_service_extras(service_type: str) -> list[ServiceExtra]:
    """Return the extras offered for a service type, in catalog order."""
    normalized = (service_type or "").strip().lower()
    return [extra for extra in SERVICE_EXTRAS if extra.service_type == normalized]


def get_extra(extra_id: int) -> Optional[ServiceExtra]:
    """Look up a single extra by id."""
    for extra in SERVICE_EXTRAS:
        if extra.id == extra_id:
            return extra
    return None
