"""
Event Repository Port - Interface for event persistence.
Implementations: eventdesk/infrastructure/persistence/
"""

from abc import ABC, abstractmethod
from typing import Optional

from eventdesk.domain.entities.event import Event
from eventdesk.domain.value_objects.event_id import EventId


class EventRepository(ABC):
    @abstractmethod
    async def add(self, event: Event) -> None: ...

    @abstractmethod
    async def save(self, event: Event) -> None: ...

    @abstractmethod
    async def get_by_id(self, event_id: EventId) -> Optional[Event]: ...

    @abstractmethod
    async def list(
        self, limit: int, include_cancelled: bool = False
    ) -> list[Event]:
        """Events ordered by start time, soonest first."""
        ...
