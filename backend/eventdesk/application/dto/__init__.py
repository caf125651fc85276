"""
DTOs - Data Transfer Objects

DTOs returned by handlers to callers:
- event.py  → EventDTO, EventSummaryDTO
- review.py → ReviewDTO

Note: These are different from domain entities.
DTOs are immutable responses, entities are for business logic.
"""

from eventdesk.application.dto.event import EventDTO, EventSummaryDTO
from eventdesk.application.dto.review import ReviewDTO

__all__ = [
    "EventDTO",
    "EventSummaryDTO",
    "ReviewDTO",
]
