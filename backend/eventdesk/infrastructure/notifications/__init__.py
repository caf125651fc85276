"""
Notifiers - NotificationPort implementations, one per channel.
"""

from eventdesk.infrastructure.notifications.email_notifier import EmailNotifier
from eventdesk.infrastructure.notifications.sms_notifier import SmsNotifier
from eventdesk.infrastructure.notifications.slack_notifier import SlackNotifier

__all__ = [
    "EmailNotifier",
    "SmsNotifier",
    "SlackNotifier",
]
