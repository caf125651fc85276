"""
In-memory Review Repository.

Enforces one review per (event, author) under its own lock, the same way
the @@unique constraint does for the Prisma store.
"""

import asyncio
import copy
from typing import Optional

from eventdesk.domain.entities.review import Review
from eventdesk.domain.exceptions import ConflictError
from eventdesk.domain.ports.repositories import ReviewRepository
from eventdesk.domain.value_objects.event_id import EventId
from eventdesk.domain.value_objects.review_id import ReviewId
from eventdesk.domain.value_objects.user_email import UserEmail


def _author_key(event_id: EventId, author_email: UserEmail) -> tuple[str, str]:
    return event_id.value, author_email.value.lower()


class InMemoryReviewRepository(ReviewRepository):
    def __init__(self):
        self._reviews: dict[str, Review] = {}
        self._authors: set[tuple[str, str]] = set()
        self._lock = asyncio.Lock()

    async def add(self, review: Review) -> None:
        key = _author_key(review.event_id, review.author_email)
        async with self._lock:
            if key in self._authors:
                raise ConflictError(
                    f"{review.author_email.value} has already reviewed "
                    f"event {review.event_id.value}"
                )
            self._reviews[review.id.value] = copy.deepcopy(review)
            self._authors.add(key)

    async def get_by_id(self, review_id: ReviewId) -> Optional[Review]:
        review = self._reviews.get(review_id.value)
        return copy.deepcopy(review) if review else None

    async def list_by_event(self, event_id: EventId) -> list[Review]:
        reviews = [
            review
            for review in self._reviews.values()
            if review.event_id.value == event_id.value
        ]
        reviews.sort(key=lambda review: review.created_at)
        return [copy.deepcopy(review) for review in reviews]

    async def exists_for_author(
        self, event_id: EventId, author_email: UserEmail
    ) -> bool:
        return _author_key(event_id, author_email) in self._authors
