"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
- Is created and changed only through repository writes issued by a handler
"""

from eventdesk.domain.entities.event import Event, EventStatus
from eventdesk.domain.entities.review import Review

__all__ = [
    "Event",
    "EventStatus",
    "Review",
]
