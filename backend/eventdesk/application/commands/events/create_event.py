"""
Create Event Command.

Guidelines:
- Command: @dataclass(frozen=True) holding raw input data
- VALIDATOR: structural rules, checked by the dispatcher before the handler runs
- Handler: receives repository and notifiers via __init__ (DI)
- Returns: EventId

Handler.execute():
   - Build value objects (already validated, so construction cannot fail)
   - Create Event entity
   - Add via repository
   - Queue "event scheduled" notice to the organizer (post-commit)
   - Return event id
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Sequence

from eventdesk.application.common.interfaces import Command, CommandHandler
from eventdesk.application.common.post_commit import PostCommit
from eventdesk.application.common.request_kind import RequestKind
from eventdesk.application.common.validation import (
    Validator,
    check,
    in_range,
    matches,
    max_length,
    required,
)
from eventdesk.domain.entities.event import Event
from eventdesk.domain.ports.notification_port import NotificationPort
from eventdesk.domain.ports.repositories import EventRepository
from eventdesk.domain.value_objects import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    EventId,
    NotificationMessage,
    PhoneNumber,
    Recipient,
    UserEmail,
)


@dataclass(frozen=True)
class CreateEventCommand(Command[EventId]):
    kind: ClassVar[RequestKind] = RequestKind.CREATE_EVENT

    title: str
    venue: str
    starts_at: datetime
    capacity: int
    organizer_email: str
    description: str = ""
    organizer_phone: Optional[str] = None


def _aware(command: CreateEventCommand) -> bool:
    starts_at = command.starts_at
    return isinstance(starts_at, datetime) and starts_at.tzinfo is not None


VALIDATOR = Validator(
    required("title", "title required"),
    max_length("title", 120),
    required("venue", "venue required"),
    max_length("description", 5000),
    check("starts_at", _aware, "starts_at must be a timezone-aware datetime"),
    in_range("capacity", 1, 100_000, "capacity out of range"),
    matches("organizer_email", EMAIL_PATTERN, "organizer email is not valid"),
    matches(
        "organizer_phone", PHONE_PATTERN, "organizer phone is not valid", optional=True
    ),
)


class CreateEventHandler(CommandHandler[EventId]):
    def __init__(
        self,
        event_repository: EventRepository,
        notifiers: Sequence[NotificationPort] = (),
    ):
        self._event_repository = event_repository
        self._notifiers = tuple(notifiers)

    async def execute(
        self, command: CreateEventCommand, post_commit: PostCommit
    ) -> EventId:
        event = Event.create(
            title=command.title,
            description=command.description,
            venue=command.venue,
            starts_at=command.starts_at,
            capacity=command.capacity,
            organizer_email=UserEmail(command.organizer_email),
            organizer_phone=(
                PhoneNumber(command.organizer_phone) if command.organizer_phone else None
            ),
        )
        await self._event_repository.add(event)

        post_commit.notify(
            self._notifiers,
            NotificationMessage(
                recipient=Recipient(
                    email=event.organizer_email, phone=event.organizer_phone
                ),
                subject="Your event is scheduled",
                body=(
                    f"'{event.title}' at {event.venue} on "
                    f"{event.starts_at:%Y-%m-%d %H:%M %Z} is now published."
                ),
            ),
        )
        return event.id
