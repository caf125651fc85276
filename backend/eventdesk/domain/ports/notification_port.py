"""
Notification Port - Interface for one outbound messaging channel.
Implementations: eventdesk/infrastructure/notifications/

Every channel has the same shape, so a handler can hold several ports and
hand each of them the same NotificationMessage without branching on channel.
"""

from abc import ABC, abstractmethod

from eventdesk.domain.value_objects.notification_message import (
    DeliveryResult,
    NotificationMessage,
)


class NotificationPort(ABC):
    channel: str

    @abstractmethod
    async def send(self, message: NotificationMessage) -> DeliveryResult:
        """
        Deliver the message on this channel.

        Returns a DeliveryResult; a channel may also raise on failure.
        Returns a skipped result when the recipient has no address here.
        """
        ...
