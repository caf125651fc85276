"""
Event Entity - Something people attend and review afterwards.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from eventdesk.domain.exceptions.conflict import ConflictError
from eventdesk.domain.value_objects.event_id import EventId
from eventdesk.domain.value_objects.phone_number import PhoneNumber
from eventdesk.domain.value_objects.user_email import UserEmail


class EventStatus(str, Enum):
    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"


@dataclass
class Event:
    id: EventId
    title: str
    description: str
    venue: str
    starts_at: datetime
    capacity: int
    organizer_email: UserEmail
    organizer_phone: Optional[PhoneNumber]
    status: EventStatus
    created_at: datetime
    updated_at: datetime
    cancellation_reason: Optional[str] = None

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        venue: str,
        starts_at: datetime,
        capacity: int,
        organizer_email: UserEmail,
        organizer_phone: Optional[PhoneNumber] = None,
    ) -> "Event":
        now = datetime.now(timezone.utc)
        return cls(
            id=EventId.new(),
            title=title.strip(),
            description=description.strip(),
            venue=venue.strip(),
            starts_at=starts_at,
            capacity=capacity,
            organizer_email=organizer_email,
            organizer_phone=organizer_phone,
            status=EventStatus.SCHEDULED,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_cancelled(self) -> bool:
        return self.status is EventStatus.CANCELLED

    def is_organized_by(self, email: UserEmail) -> bool:
        return self.organizer_email.value.lower() == email.value.lower()

    def cancel(self, reason: Optional[str] = None) -> None:
        if self.is_cancelled:
            raise ConflictError(f"Event {self.id.value} is already cancelled")

        self.status = EventStatus.CANCELLED
        self.cancellation_reason = reason or None
        self.updated_at = datetime.now(timezone.utc)
