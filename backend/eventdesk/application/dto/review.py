"""Review DTOs returned by review queries."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from eventdesk.domain.entities.review import Review


class ReviewDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    event_id: str
    rating: int
    comment: str
    author_email: str
    created_at: datetime

    @classmethod
    def from_entity(cls, review: Review) -> "ReviewDTO":
        return cls(
            id=review.id.value,
            event_id=review.event_id.value,
            rating=review.rating,
            comment=review.comment,
            author_email=review.author_email.value,
            created_at=review.created_at,
        )
