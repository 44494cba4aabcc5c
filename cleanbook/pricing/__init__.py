from cleanbook.pricing.engine import (
    compute_pricing,
    parse_amount,
    parse_duration_text,
    resolve_tip,
)

__all__ = ["compute_pricing", "parse_duration_text", "parse_amount", "resolve_tip"]
