"""
NotificationError - Raised by a notifier when a channel rejects a message.

Never reaches the caller of a dispatch: the notification dispatcher logs it,
counts it and retries or drops the message.
"""


class NotificationError(Exception):
    def __init__(self, channel: str, message: str):
        super().__init__(f"[{channel}] {message}")
        self.channel = channel
