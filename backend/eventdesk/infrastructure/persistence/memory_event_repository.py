"""
In-memory Event Repository.

Entities are deep-copied on the way in and out, so callers only ever change
stored state through add()/save(). Every write is one synchronous step under
the lock, which keeps it atomic even if the calling task is cancelled.
"""

import asyncio
import copy
from typing import Optional

from eventdesk.domain.entities.event import Event
from eventdesk.domain.exceptions import ConflictError
from eventdesk.domain.ports.repositories import EventRepository
from eventdesk.domain.value_objects.event_id import EventId


class InMemoryEventRepository(EventRepository):
    def __init__(self):
        self._events: dict[str, Event] = {}
        self._lock = asyncio.Lock()

    async def add(self, event: Event) -> None:
        async with self._lock:
            if event.id.value in self._events:
                raise ConflictError(f"Event {event.id.value} already exists")
            self._events[event.id.value] = copy.deepcopy(event)

    async def save(self, event: Event) -> None:
        async with self._lock:
            self._events[event.id.value] = copy.deepcopy(event)

    async def get_by_id(self, event_id: EventId) -> Optional[Event]:
        event = self._events.get(event_id.value)
        return copy.deepcopy(event) if event else None

    async def list(self, limit: int, include_cancelled: bool = False) -> list[Event]:
        events = [
            event
            for event in self._events.values()
            if include_cancelled or not event.is_cancelled
        ]
        events.sort(key=lambda event: (event.starts_at, event.created_at))
        return [copy.deepcopy(event) for event in events[:limit]]
