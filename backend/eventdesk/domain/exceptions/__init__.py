"""
DOMAIN EXCEPTIONS - Business rule violations and port failures

These exceptions are raised by handlers and repositories and caught by the
presentation layer, which maps them to HTTP status codes.
"""

from eventdesk.domain.exceptions.entity_not_found import EntityNotFoundError
from eventdesk.domain.exceptions.access_denied import AccessDeniedError
from eventdesk.domain.exceptions.conflict import ConflictError
from eventdesk.domain.exceptions.persistence import PersistenceError
from eventdesk.domain.exceptions.notification import NotificationError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "ConflictError",
    "PersistenceError",
    "NotificationError",
]
