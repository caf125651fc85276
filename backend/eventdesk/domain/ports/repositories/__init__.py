"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the handlers need
- Does NOT specify implementation (Prisma, in-memory, ...)
- Raises PersistenceError when the store fails, ConflictError on unique violations
- Makes every single write atomic; no transaction API is exposed

Infrastructure layer provides implementations.
"""

from eventdesk.domain.ports.repositories.event_repository import EventRepository
from eventdesk.domain.ports.repositories.review_repository import ReviewRepository

__all__ = [
    "EventRepository",
    "ReviewRepository",
]
