"""
Centralized configuration with environment variable overrides.

Business contact details, scheduling policy, and reminder timing are
configurable here. Pricing rules live with the pricing engine because
they are part of the published price list, not deployment settings.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from cleanbook.logging_context import RequestIdFilter

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


def _safe_bool(env_var: str, default: str) -> bool:
    """Parse a boolean flag ("true"/"false", "1"/"0", "yes"/"no")."""
    raw = os.getenv(env_var, default).strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean for {env_var}: {raw!r}")


@dataclass(frozen=True)
class BusinessConfig:
    """Business-specific settings loaded from environment or defaults."""

    name: str = os.getenv("BUSINESS_NAME", "Sparkle & Shine Cleaning")
    owner_email: str = os.getenv("OWNER_EMAIL", "bookings@sparkleandshine.co.uk")
    phone: str = os.getenv("BUSINESS_PHONE", "020 7946 0000")
    currency_symbol: str = os.getenv("CURRENCY_SYMBOL", "£")


@dataclass(frozen=True)
class SchedulingConfig:
    """Booking window and reminder timing."""

    enforce_minimum_notice: bool = _safe_bool("ENFORCE_MINIMUM_NOTICE", "true")
    enforce_minimum_duration: bool = _safe_bool("ENFORCE_MINIMUM_DURATION", "true")
    reminder_lead_hours: int = _safe_int("REMINDER_LEAD_HOURS", "24")
    reminder_poll_minutes: int = _safe_int("REMINDER_POLL_MINUTES", "60")
    max_duration_hours: float = _safe_float("MAX_DURATION_HOURS", "12")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    scheduling: SchedulingConfig = field(default_factory=SchedulingConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.scheduling.reminder_lead_hours < 1:
        raise ValueError(
            f"REMINDER_LEAD_HOURS must be >= 1, got {config.scheduling.reminder_lead_hours}"
        )
    if config.scheduling.reminder_poll_minutes < 1:
        raise ValueError(
            "REMINDER_POLL_MINUTES must be >= 1, "
            f"got {config.scheduling.reminder_poll_minutes}"
        )
    if config.scheduling.max_duration_hours <= 0:
        raise ValueError(
            f"MAX_DURATION_HOURS must be > 0, got {config.scheduling.max_duration_hours}"
        )
    if "@" not in config.business.owner_email:
        raise ValueError(
            f"OWNER_EMAIL must be an email address, got {config.business.owner_email!r}"
        )


LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(request_id)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _log_handler() -> logging.Handler:
    """Console handler that stamps every record with the current request id."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    handler.addFilter(RequestIdFilter())
    return handler


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        handlers=[_log_handler()],
    )
    logger.info("Configuration loaded for '%s'", config.business.name)
    return config


# Singleton instance
settings = load_config()
