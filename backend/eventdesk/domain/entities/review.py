"""
Review Entity - A rating and comment left by an attendee for an event.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from eventdesk.domain.value_objects.event_id import EventId
from eventdesk.domain.value_objects.phone_number import PhoneNumber
from eventdesk.domain.value_objects.review_id import ReviewId
from eventdesk.domain.value_objects.user_email import UserEmail


@dataclass
class Review:
    id: ReviewId
    event_id: EventId
    rating: int
    comment: str
    author_email: UserEmail
    author_phone: Optional[PhoneNumber]
    created_at: datetime

    @classmethod
    def create(
        cls,
        event_id: EventId,
        rating: int,
        comment: str,
        author_email: UserEmail,
        author_phone: Optional[PhoneNumber] = None,
    ) -> "Review":
        return cls(
            id=ReviewId.new(),
            event_id=event_id,
            rating=rating,
            comment=comment.strip(),
            author_email=author_email,
            author_phone=author_phone,
            created_at=datetime.now(timezone.utc),
        )
