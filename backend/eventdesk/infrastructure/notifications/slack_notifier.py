"""
Slack notifier - direct message to the recipient's Slack user id, or a post
to a fallback channel (e.g. an organizers' feed) when the recipient has none.
"""

import logging
from typing import Optional

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from eventdesk.domain.ports.notification_port import NotificationPort
from eventdesk.domain.value_objects.notification_message import (
    DeliveryResult,
    NotificationMessage,
)

logger = logging.getLogger(__name__)


class SlackNotifier(NotificationPort):
    channel = "slack"

    def __init__(
        self,
        token: str,
        default_channel: Optional[str] = None,
        client: Optional[AsyncWebClient] = None,
    ):
        self._client = client or AsyncWebClient(token=token)
        self._default_channel = default_channel

    async def send(self, message: NotificationMessage) -> DeliveryResult:
        text = f"*{message.subject}*\n{message.body}"
        target = message.recipient.address_for(self.channel)
        if not target and self._default_channel:
            target = self._default_channel
            text += f"\n_for {message.recipient}_"
        if not target:
            return DeliveryResult.skip(self.channel, "no Slack user id or channel")

        try:
            response = await self._client.chat_postMessage(
                channel=target,
                text=text,
            )
        except SlackApiError as e:
            error = e.response.get("error", str(e)) if e.response is not None else str(e)
            logger.warning(f"Slack rejected message to {target}: {error}")
            return DeliveryResult.failed(self.channel, error)

        return DeliveryResult.sent(self.channel, ts=response.get("ts"))
