"""
Prisma Event Repository Implementation.

- Implements EventRepository port from domain layer
- Maps between Prisma models and domain entities
- Prisma errors surface as ConflictError / PersistenceError
"""

from typing import Optional

from prisma import Prisma
from prisma.models import Event as PrismaEvent

from eventdesk.domain.entities.event import Event, EventStatus
from eventdesk.domain.ports.repositories import EventRepository
from eventdesk.domain.value_objects.event_id import EventId
from eventdesk.domain.value_objects.phone_number import PhoneNumber
from eventdesk.domain.value_objects.user_email import UserEmail
from eventdesk.infrastructure.persistence.prisma_errors import translate_prisma_errors


class PrismaEventRepository(EventRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaEvent) -> Event:
        """Map Prisma record to domain entity."""
        return Event(
            id=EventId(record.id),
            title=record.title,
            description=record.description,
            venue=record.venue,
            starts_at=record.starts_at,
            capacity=record.capacity,
            organizer_email=UserEmail(record.organizer_email),
            organizer_phone=(
                PhoneNumber(record.organizer_phone) if record.organizer_phone else None
            ),
            status=EventStatus(record.status),
            cancellation_reason=record.cancellation_reason,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def _to_update_dict(self, event: Event) -> dict:
        return {
            "title": event.title,
            "description": event.description,
            "venue": event.venue,
            "starts_at": event.starts_at,
            "capacity": event.capacity,
            "organizer_phone": (
                event.organizer_phone.value if event.organizer_phone else None
            ),
            "status": event.status.value,
            "cancellation_reason": event.cancellation_reason,
            "updated_at": event.updated_at,
        }

    async def add(self, event: Event) -> None:
        data = self._to_update_dict(event)
        data.update(
            id=event.id.value,
            organizer_email=event.organizer_email.value,
            created_at=event.created_at,
        )
        with translate_prisma_errors("create event"):
            await self._prisma.event.create(data=data)

    async def save(self, event: Event) -> None:
        """Update a stored event."""
        with translate_prisma_errors("update event"):
            await self._prisma.event.update(
                where={"id": event.id.value}, data=self._to_update_dict(event)
            )

    async def get_by_id(self, event_id: EventId) -> Optional[Event]:
        with translate_prisma_errors("get event"):
            record = await self._prisma.event.find_unique(where={"id": event_id.value})
        return self._to_entity(record) if record else None

    async def list(self, limit: int, include_cancelled: bool = False) -> list[Event]:
        where = {} if include_cancelled else {"status": EventStatus.SCHEDULED.value}
        with translate_prisma_errors("list events"):
            records = await self._prisma.event.find_many(
                where=where,
                order=[{"starts_at": "asc"}, {"created_at": "asc"}],
                take=limit,
            )
        return [self._to_entity(record) for record in records]
