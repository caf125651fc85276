"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the application needs,
without specifying HOW it's done.

- repositories/        → Data persistence interfaces (events, reviews)
- notification_port.py → Best-effort outbound messaging (email, sms, slack)
"""

from eventdesk.domain.ports.notification_port import NotificationPort

__all__ = ["NotificationPort"]
