"""
Create Review Command.

Flow:
1. Dispatcher validates rating (1..5), comment, author contacts
2. Handler checks state-dependent rules:
   a. event exists                      → EntityNotFoundError
   b. event is not cancelled            → ConflictError
   c. author has not reviewed it before → ConflictError
3. Review is added through the repository
4. "Thanks for your review!" is queued for every notifier (post-commit)
5. Returns ReviewId - even if every notifier later fails
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

from eventdesk.application.common.interfaces import Command, CommandHandler
from eventdesk.application.common.post_commit import PostCommit
from eventdesk.application.common.request_kind import RequestKind
from eventdesk.application.common.validation import (
    Validator,
    in_range,
    matches,
    max_length,
    required,
    valid_uuid,
)
from eventdesk.domain.entities.review import Review
from eventdesk.domain.exceptions import ConflictError, EntityNotFoundError
from eventdesk.domain.ports.notification_port import NotificationPort
from eventdesk.domain.ports.repositories import EventRepository, ReviewRepository
from eventdesk.domain.value_objects import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    EventId,
    NotificationMessage,
    PhoneNumber,
    Recipient,
    ReviewId,
    UserEmail,
)

THANK_YOU_SUBJECT = "Thanks for your review!"


@dataclass(frozen=True)
class CreateReviewCommand(Command[ReviewId]):
    kind: ClassVar[RequestKind] = RequestKind.CREATE_REVIEW

    event_id: str
    rating: int
    comment: str
    author_email: str
    author_phone: Optional[str] = None


VALIDATOR = Validator(
    valid_uuid("event_id"),
    in_range("rating", 1, 5, "rating out of range"),
    required("comment", "comment required"),
    max_length("comment", 2000),
    matches("author_email", EMAIL_PATTERN, "author email is not valid"),
    matches("author_phone", PHONE_PATTERN, "author phone is not valid", optional=True),
)


class CreateReviewHandler(CommandHandler[ReviewId]):
    def __init__(
        self,
        event_repository: EventRepository,
        review_repository: ReviewRepository,
        notifiers: Sequence[NotificationPort] = (),
    ):
        self._event_repository = event_repository
        self._review_repository = review_repository
        self._notifiers = tuple(notifiers)

    async def execute(
        self, command: CreateReviewCommand, post_commit: PostCommit
    ) -> ReviewId:
        event_id = EventId(command.event_id)
        event = await self._event_repository.get_by_id(event_id)
        if not event:
            raise EntityNotFoundError("Event", event_id.value)
        if event.is_cancelled:
            raise ConflictError(f"Event {event_id.value} is cancelled")

        author_email = UserEmail(command.author_email)
        if await self._review_repository.exists_for_author(event_id, author_email):
            raise ConflictError(
                f"{author_email.value} has already reviewed event {event_id.value}"
            )

        review = Review.create(
            event_id=event_id,
            rating=command.rating,
            comment=command.comment,
            author_email=author_email,
            author_phone=(
                PhoneNumber(command.author_phone) if command.author_phone else None
            ),
        )
        await self._review_repository.add(review)

        post_commit.notify(
            self._notifiers,
            NotificationMessage(
                recipient=Recipient(email=review.author_email, phone=review.author_phone),
                subject=THANK_YOU_SUBJECT,
                body=(
                    f"Thanks for rating '{event.title}' {review.rating}/5. "
                    "Your review is now visible to other attendees."
                ),
            ),
        )
        return review.id
