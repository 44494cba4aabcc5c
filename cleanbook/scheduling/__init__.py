from cleanbook.scheduling.conflicts import (
    conflicting_booking_ids,
    find_conflicts,
    overlap_minutes,
)

__all__ = ["find_conflicts", "conflicting_booking_ids", "overlap_minutes"]
