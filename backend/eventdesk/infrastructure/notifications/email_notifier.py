"""
Email notifier - SMTP with STARTTLS.

smtplib is blocking, so the actual send runs in a worker thread.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from eventdesk.domain.ports.notification_port import NotificationPort
from eventdesk.domain.value_objects.notification_message import (
    DeliveryResult,
    NotificationMessage,
)

logger = logging.getLogger(__name__)


class EmailNotifier(NotificationPort):
    channel = "email"

    def __init__(
        self,
        smtp_server: str,
        smtp_port: int,
        smtp_user: str,
        smtp_password: str,
        sender: Optional[str] = None,
        timeout: float = 10.0,
    ):
        self._smtp_server = smtp_server
        self._smtp_port = smtp_port
        self._smtp_user = smtp_user
        self._smtp_password = smtp_password
        self._sender = sender or smtp_user
        self._timeout = timeout

    def _build(self, to_address: str, message: NotificationMessage) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self._sender
        msg["To"] = to_address
        msg["Subject"] = message.subject
        msg.set_content(message.body)
        return msg

    def _send_blocking(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(
            self._smtp_server, self._smtp_port, timeout=self._timeout
        ) as server:
            server.starttls()
            server.login(self._smtp_user, self._smtp_password)
            server.send_message(msg)

    async def send(self, message: NotificationMessage) -> DeliveryResult:
        to_address = message.recipient.address_for(self.channel)
        if not to_address:
            return DeliveryResult.skip(self.channel, "recipient has no email address")
        if not self._smtp_user or not self._smtp_password:
            return DeliveryResult.failed(
                self.channel, "SMTP credentials are not configured."
            )

        msg = self._build(to_address, message)
        try:
            await asyncio.to_thread(self._send_blocking, msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending email to {to_address}: {e}")
            return DeliveryResult.failed(self.channel, str(e))

        return DeliveryResult.sent(self.channel, recipient=to_address)
