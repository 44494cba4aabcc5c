"""
Booking core entry point.

Runs the reminder dispatcher loop or the offline console demo.

Usage:
    Reminder worker: python main.py reminders
    Console demo:    python main.py console
"""

import asyncio
import logging
import sys

from cleanbook.config import settings
from cleanbook.schemas.booking_schema import Booking

logger = logging.getLogger(__name__)


async def _log_sender(booking: Booking, message: str) -> bool:
    """Stand-in mail sender: logs the reminder instead of emailing it."""
    logger.info("Reminder to %s <%s>: %s", booking.full_name, booking.email, message)
    return True


async def run_reminder_worker() -> None:
    """Poll for due reminders every ``reminder_poll_minutes``."""
    from cleanbook.tools.reminders import process_pending_reminders

    interval = settings.scheduling.reminder_poll_minutes * 60
    logger.info("Starting reminder service (every %d minutes)", settings.scheduling.reminder_poll_minutes)
    while True:
        sent = await process_pending_reminders(_log_sender)
        logger.debug("Reminder pass complete, %d sent", sent)
        await asyncio.sleep(interval)


def _run_console_mode() -> None:
    """Start the offline console demo."""
    from console_demo import main as console_main

    sys.argv = sys.argv[:1] + sys.argv[2:]
    console_main()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "console":
        _run_console_mode()
    else:
        try:
            asyncio.run(run_reminder_worker())
        except KeyboardInterrupt:
            logger.info("Reminder service stopped")
