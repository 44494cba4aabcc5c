from cleanbook.intake.validation import BookingValidationError, validate_draft

__all__ = ["BookingValidationError", "validate_draft"]
