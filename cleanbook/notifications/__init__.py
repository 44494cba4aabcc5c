from cleanbook.notifications.messages import (
    customer_confirmation,
    default_reminder_message,
    owner_notification,
)

__all__ = ["customer_confirmation", "owner_notification", "default_reminder_message"]
