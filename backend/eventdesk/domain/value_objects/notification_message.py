"""
Notification value objects - what a handler hands to a notifier and what
the notifier hands back.
"""

from dataclasses import dataclass, field
from typing import Optional

from eventdesk.domain.value_objects.phone_number import PhoneNumber
from eventdesk.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class Recipient:
    """Per-channel addresses of one person; a channel without an address is skipped."""

    email: Optional[UserEmail] = None
    phone: Optional[PhoneNumber] = None
    slack_user_id: Optional[str] = None

    def address_for(self, channel: str) -> Optional[str]:
        if channel == "email" and self.email:
            return self.email.value
        if channel == "sms" and self.phone:
            return self.phone.value
        if channel == "slack" and self.slack_user_id:
            return self.slack_user_id
        return None

    def __str__(self) -> str:
        return str(self.email or self.phone or self.slack_user_id or "<nobody>")


@dataclass(frozen=True)
class NotificationMessage:
    recipient: Recipient
    subject: str
    body: str


@dataclass(frozen=True)
class DeliveryResult:
    channel: str
    delivered: bool
    skipped: bool = False
    error: Optional[str] = None
    details: dict = field(default_factory=dict, compare=False)

    @classmethod
    def sent(cls, channel: str, **details) -> "DeliveryResult":
        return cls(channel=channel, delivered=True, details=details)

    @classmethod
    def failed(cls, channel: str, error: str) -> "DeliveryResult":
        return cls(channel=channel, delivered=False, error=error)

    @classmethod
    def skip(cls, channel: str, reason: str) -> "DeliveryResult":
        return cls(channel=channel, delivered=False, skipped=True, error=reason)
