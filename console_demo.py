"""
Offline console demo: walks through the booking wizard and admin panel.

Each scenario edits a draft one field at a time and re-renders the live
price summary after every change, then submits it. The admin scenario
books overlapping jobs and shows the conflict alerts and reminders.

Usage:
    python console_demo.py
    python console_demo.py --scenario airbnb
    python console_demo.py --scenario admin
"""

import argparse
from datetime import date, datetime, timedelta
from typing import Any

from cleanbook.admin.dashboard import filter_bookings, summarize
from cleanbook.config import settings
from cleanbook.pricing.engine import compute_pricing
from cleanbook.schemas.booking_schema import BookingDraft, PriceBreakdown, SelectedExtra, TipSpec
from cleanbook.scheduling.conflicts import find_conflicts
from cleanbook.tools import booking as booking_store
from cleanbook.tools import reminders
from cleanbook.tools.booking import get_all_bookings, submit_booking
from cleanbook.tools.extras import get_service_extras
from cleanbook.tools.services import get_service_name

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

CONTACT: dict[str, Any] = {
    "full_name": "Jane Doe",
    "email": "jane.doe@example.com",
    "phone": "07700 900123",
    "address1": "12 Acacia Avenue",
    "city": "London",
    "postcode": "N1 9GU",
}


class WizardSession:
    """Replays form edits against the pricing engine, like the summary sidebar."""

    def __init__(self, today: date) -> None:
        self.today = today
        self.draft = BookingDraft()

    def log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def show(self, breakdown: PriceBreakdown) -> None:
        symbol = settings.business.currency_symbol
        if breakdown.quote_based:
            print(
                f"{YELLOW}  [summary] quote required | extras {symbol}{breakdown.extras_total}"
                f" | total {symbol}{breakdown.total}{RESET}"
            )
            return
        print(
            f"{GREEN}  [summary] base {symbol}{breakdown.base_price}"
            f" + extras {symbol}{breakdown.extras_total}"
            f" + tip {symbol}{breakdown.tip_amount}"
            f" = {BOLD}{symbol}{breakdown.total}{RESET}{GREEN}"
            f" | {breakdown.total_duration_minutes} mins{RESET}"
        )

    def edit(self, **changes: Any) -> None:
        print(f"\n{BLUE}[Customer]{RESET} sets {changes}")
        self.draft = self.draft.model_copy(update=changes)
        self.show(compute_pricing(self.draft, get_service_extras(self.draft.service_type)))

    def submit(self) -> None:
        result = submit_booking(self.draft, today=self.today)
        if result["success"]:
            print(f"\n{GREEN}{BOLD}{result['message']}{RESET}")
            booking = result["booking"]
            self.log(f"Stored total {booking.total_price}, scheduled {booking.duration:g} hours")
        else:
            print(f"\n{RED}{result['message']}{RESET}")
            for error in result["errors"]:
                self.log(error)


def _extra_id(service_type: str, name: str) -> int:
    for extra in get_service_extras(service_type):
        if extra.name == name:
            return extra.id
    raise KeyError(f"No extra named {name!r} for {service_type}")


def _on(today: date, days: int) -> str:
    return (today + timedelta(days=days)).isoformat()


def run_deep(session: WizardSession) -> None:
    session.edit(service_type="deep")
    session.edit(bedrooms=3, bathrooms=2)
    session.edit(carpet_cleaning_areas=1)
    session.edit(selected_extras=[SelectedExtra(extra_id=_extra_id("deep", "Oven Deep Clean"))])
    session.edit(tip=TipSpec.percent(10))
    session.edit(booking_date=_on(session.today, 1), booking_time="09:00", **CONTACT)
    session.submit()
    session.edit(booking_date=_on(session.today, 5))
    session.submit()


def run_airbnb(session: WizardSession) -> None:
    session.edit(service_type="airbnb", bedrooms=1)
    session.edit(bedrooms=3)
    session.edit(
        selected_extras=[SelectedExtra(extra_id=_extra_id("airbnb", "Linen Change"), quantity=3)]
    )
    session.edit(tip=TipSpec.custom("5"))
    session.edit(booking_date=_on(session.today, 2), booking_time="11:00", **CONTACT)
    session.submit()


def run_jet(session: WizardSession) -> None:
    session.edit(service_type="jet", surface_type="driveway", surface_material="block paving")
    session.edit(
        selected_extras=[
            SelectedExtra(extra_id=_extra_id("jet", "Moss Treatment")),
            SelectedExtra(extra_id=_extra_id("jet", "Gutter Cleaning")),
        ]
    )
    session.edit(tip=TipSpec.percent(20))
    session.edit(
        quote_request="Roughly 40 square metres, some oil stains",
        booking_date=_on(session.today, 3),
        booking_time="10:00",
        **CONTACT,
    )
    session.submit()


def run_admin(today: date) -> None:
    day = _on(today, 7)
    for time, hours in [("09:00", 2), ("10:00", 2), ("12:00", 2), ("12:00", 3)]:
        session = WizardSession(today)
        session.draft = BookingDraft(
            service_type="general", duration=hours, booking_date=day, booking_time=time, **CONTACT
        )
        session.submit()

    bookings = get_all_bookings()
    conflicts = find_conflicts(bookings)
    summary = summarize(bookings, today=today, conflicts=conflicts)
    print(f"\n{BOLD}Admin panel{RESET}")
    print(f"  Bookings: {summary.total_bookings}  Conflicts: {summary.conflict_count}"
          f"  Revenue: {settings.business.currency_symbol}{summary.revenue}")
    for pair in conflicts:
        print(
            f"{RED}  ! #{pair.booking_a.id} {pair.booking_a.booking_time} overlaps "
            f"#{pair.booking_b.id} {pair.booking_b.booking_time} by {pair.overlap_minutes} mins{RESET}"
        )
    clashing = filter_bookings(bookings, status="conflicts", conflicts=conflicts)
    print(f"  Filter 'conflicts': {[b.id for b in clashing]}")

    created = reminders.create_missing_reminders(admin_id=1, now=datetime.combine(today, datetime.min.time()))
    print(f"  Reminders created: {created}")
    for reminder in reminders.get_all_reminders():
        booking = booking_store.get_booking(reminder.booking_id)
        print(f"{DIM}    {get_service_name(booking.service_type)} #{booking.id}: {reminder.scheduled_at}{RESET}")


SCENARIOS = {"deep": run_deep, "airbnb": run_airbnb, "jet": run_jet}


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline booking wizard demo")
    parser.add_argument(
        "--scenario",
        choices=[*SCENARIOS, "admin"],
        default="deep",
        help="Which pre-scripted walkthrough to play",
    )
    args = parser.parse_args()

    today = date.today()
    print(f"{BOLD}{'=' * 60}{RESET}")
    print(f"{BOLD}  {settings.business.name} - Scenario: {args.scenario}{RESET}")
    print(f"{BOLD}{'=' * 60}{RESET}")

    if args.scenario == "admin":
        run_admin(today)
    else:
        SCENARIOS[args.scenario](WizardSession(today))


if __name__ == "__main__":
    main()
