"""
Review Repository Port - Interface for review persistence.
Implementations: eventdesk/infrastructure/persistence/
"""

from abc import ABC, abstractmethod
from typing import Optional

from eventdesk.domain.entities.review import Review
from eventdesk.domain.value_objects.event_id import EventId
from eventdesk.domain.value_objects.review_id import ReviewId
from eventdesk.domain.value_objects.user_email import UserEmail


class ReviewRepository(ABC):
    @abstractmethod
    async def add(self, review: Review) -> None:
        """Insert a review. Raises ConflictError if the author already reviewed the event."""
        ...

    @abstractmethod
    async def get_by_id(self, review_id: ReviewId) -> Optional[Review]: ...

    @abstractmethod
    async def list_by_event(self, event_id: EventId) -> list[Review]: ...

    @abstractmethod
    async def exists_for_author(
        self, event_id: EventId, author_email: UserEmail
    ) -> bool: ...
