"""Event DTOs returned by event commands and queries."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from eventdesk.domain.entities.event import Event


class EventDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    venue: str
    starts_at: datetime
    capacity: int
    organizer_email: str
    status: str
    cancellation_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, event: Event) -> "EventDTO":
        return cls(
            id=event.id.value,
            title=event.title,
            description=event.description,
            venue=event.venue,
            starts_at=event.starts_at,
            capacity=event.capacity,
            organizer_email=event.organizer_email.value,
            status=event.status.value,
            cancellation_reason=event.cancellation_reason,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class EventSummaryDTO(BaseModel):
    """Projection used by the events list."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    venue: str
    starts_at: datetime
    status: str

    @classmethod
    def from_entity(cls, event: Event) -> "EventSummaryDTO":
        return cls(
            id=event.id.value,
            title=event.title,
            venue=event.venue,
            starts_at=event.starts_at,
            status=event.status.value,
        )
