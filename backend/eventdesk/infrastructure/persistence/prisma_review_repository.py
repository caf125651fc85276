"""
Prisma Review Repository Implementation.

The (event_id, author_email) unique index backs the one-review-per-author
rule; a violation comes back as ConflictError.
"""

from typing import Optional

from prisma import Prisma
from prisma.models import Review as PrismaReview

from eventdesk.domain.entities.review import Review
from eventdesk.domain.ports.repositories import ReviewRepository
from eventdesk.domain.value_objects.event_id import EventId
from eventdesk.domain.value_objects.phone_number import PhoneNumber
from eventdesk.domain.value_objects.review_id import ReviewId
from eventdesk.domain.value_objects.user_email import UserEmail
from eventdesk.infrastructure.persistence.prisma_errors import translate_prisma_errors


class PrismaReviewRepository(ReviewRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaReview) -> Review:
        return Review(
            id=ReviewId(record.id),
            event_id=EventId(record.event_id),
            rating=record.rating,
            comment=record.comment,
            author_email=UserEmail(record.author_email),
            author_phone=PhoneNumber(record.author_phone) if record.author_phone else None,
            created_at=record.created_at,
        )

    async def add(self, review: Review) -> None:
        with translate_prisma_errors("create review"):
            await self._prisma.review.create(
                data={
                    "id": review.id.value,
                    "event_id": review.event_id.value,
                    "rating": review.rating,
                    "comment": review.comment,
                    "author_email": review.author_email.value.lower(),
                    "author_phone": (
                        review.author_phone.value if review.author_phone else None
                    ),
                    "created_at": review.created_at,
                }
            )

    async def get_by_id(self, review_id: ReviewId) -> Optional[Review]:
        with translate_prisma_errors("get review"):
            record = await self._prisma.review.find_unique(where={"id": review_id.value})
        return self._to_entity(record) if record else None

    async def list_by_event(self, event_id: EventId) -> list[Review]:
        with translate_prisma_errors("list reviews"):
            records = await self._prisma.review.find_many(
                where={"event_id": event_id.value},
                order={"created_at": "asc"},
            )
        return [self._to_entity(record) for record in records]

    async def exists_for_author(
        self, event_id: EventId, author_email: UserEmail
    ) -> bool:
        with translate_prisma_errors("check review author"):
            count = await self._prisma.review.count(
                where={
                    "event_id": event_id.value,
                    "author_email": author_email.value.lower(),
                }
            )
        return count > 0
