"""
Cancel Event Command.

Only the organizer may cancel, and only once. Reviewers of the event and the
organizer are told after the cancellation has been saved.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

from eventdesk.application.common.interfaces import Command, CommandHandler
from eventdesk.application.common.post_commit import PostCommit
from eventdesk.application.common.request_kind import RequestKind
from eventdesk.application.common.validation import (
    Validator,
    matches,
    max_length,
    valid_uuid,
)
from eventdesk.application.dto.event import EventDTO
from eventdesk.domain.exceptions import AccessDeniedError, EntityNotFoundError
from eventdesk.domain.ports.notification_port import NotificationPort
from eventdesk.domain.ports.repositories import EventRepository, ReviewRepository
from eventdesk.domain.value_objects import (
    EMAIL_PATTERN,
    EventId,
    NotificationMessage,
    Recipient,
    UserEmail,
)


@dataclass(frozen=True)
class CancelEventCommand(Command[EventDTO]):
    kind: ClassVar[RequestKind] = RequestKind.CANCEL_EVENT

    event_id: str
    requested_by: str
    reason: Optional[str] = ""


VALIDATOR = Validator(
    valid_uuid("event_id"),
    matches("requested_by", EMAIL_PATTERN, "requester email is not valid"),
    max_length("reason", 500),
)


class CancelEventHandler(CommandHandler[EventDTO]):
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
        self, command: CancelEventCommand, post_commit: PostCommit
    ) -> EventDTO:
        event_id = EventId(command.event_id)
        event = await self._event_repository.get_by_id(event_id)
        if not event:
            raise EntityNotFoundError("Event", event_id.value)
        if not event.is_organized_by(UserEmail(command.requested_by)):
            raise AccessDeniedError(
                f"User {command.requested_by} does not organize event {event_id.value}"
            )

        # reviewers are read before the write; nothing may fail after it
        reviews = await self._review_repository.list_by_event(event_id)

        event.cancel((command.reason or "").strip())
        await self._event_repository.save(event)

        recipients = [Recipient(email=event.organizer_email, phone=event.organizer_phone)]
        seen = {event.organizer_email.value.lower()}
        for review in reviews:
            if review.author_email.value.lower() in seen:
                continue
            seen.add(review.author_email.value.lower())
            recipients.append(
                Recipient(email=review.author_email, phone=review.author_phone)
            )

        body = f"'{event.title}' on {event.starts_at:%Y-%m-%d} has been cancelled."
        if event.cancellation_reason:
            body += f" Reason: {event.cancellation_reason}"
        for recipient in recipients:
            post_commit.notify(
                self._notifiers,
                NotificationMessage(
                    recipient=recipient, subject="Event cancelled", body=body
                ),
            )

        return EventDTO.from_entity(event)
