"""
VALUE OBJECTS - Immutable, self-validating types.
"""

from eventdesk.domain.value_objects.event_id import EventId
from eventdesk.domain.value_objects.review_id import ReviewId
from eventdesk.domain.value_objects.user_email import UserEmail, EMAIL_PATTERN
from eventdesk.domain.value_objects.phone_number import PhoneNumber, PHONE_PATTERN
from eventdesk.domain.value_objects.notification_message import (
    DeliveryResult,
    NotificationMessage,
    Recipient,
)

__all__ = [
    "EventId",
    "ReviewId",
    "UserEmail",
    "EMAIL_PATTERN",
    "PhoneNumber",
    "PHONE_PATTERN",
    "DeliveryResult",
    "NotificationMessage",
    "Recipient",
]
