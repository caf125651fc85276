"""
SMS notifier - posts to an HTTP SMS gateway.

Gateway contract: POST {gateway_url} with a bearer token and
{"to": ..., "from": ..., "text": ...}; any 2xx means accepted.
"""

import logging
from typing import Optional

import httpx

from eventdesk.domain.exceptions import NotificationError
from eventdesk.domain.ports.notification_port import NotificationPort
from eventdesk.domain.value_objects.notification_message import (
    DeliveryResult,
    NotificationMessage,
)

logger = logging.getLogger(__name__)

MAX_SMS_LENGTH = 480


class SmsNotifier(NotificationPort):
    channel = "sms"

    def __init__(
        self,
        gateway_url: str,
        api_key: str,
        sender_id: str = "EventDesk",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        self._gateway_url = gateway_url
        self._api_key = api_key
        self._sender_id = sender_id
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @staticmethod
    def _text(message: NotificationMessage) -> str:
        text = f"{message.subject} {message.body}"
        if len(text) > MAX_SMS_LENGTH:
            text = text[: MAX_SMS_LENGTH - 3] + "..."
        return text

    async def send(self, message: NotificationMessage) -> DeliveryResult:
        to_number = message.recipient.address_for(self.channel)
        if not to_number:
            return DeliveryResult.skip(self.channel, "recipient has no phone number")

        try:
            response = await self._client.post(
                self._gateway_url,
                headers={"Authorization": f"Bearer {self._api_key}"},
                json={
                    "to": to_number,
                    "from": self._sender_id,
                    "text": self._text(message),
                },
            )
        except httpx.HTTPError as e:
            raise NotificationError(self.channel, f"gateway unreachable: {e}") from e

        if response.is_success:
            return DeliveryResult.sent(self.channel, recipient=to_number)

        logger.warning(
            f"SMS gateway rejected message to {to_number}: "
            f"{response.status_code} {response.text[:200]}"
        )
        return DeliveryResult.failed(
            self.channel, f"gateway returned HTTP {response.status_code}"
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
