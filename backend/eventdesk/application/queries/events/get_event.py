"""Get Event Query."""

from dataclasses import dataclass
from typing import ClassVar

from eventdesk.application.common.interfaces import Query, QueryHandler
from eventdesk.application.common.request_kind import RequestKind
from eventdesk.application.common.validation import Validator, valid_uuid
from eventdesk.application.dto.event import EventDTO
from eventdesk.domain.exceptions import EntityNotFoundError
from eventdesk.domain.ports.repositories import EventRepository
from eventdesk.domain.value_objects.event_id import EventId


@dataclass(frozen=True)
class GetEventQuery(Query[EventDTO]):
    kind: ClassVar[RequestKind] = RequestKind.GET_EVENT

    event_id: str


VALIDATOR = Validator(valid_uuid("event_id"))


class GetEventHandler(QueryHandler[EventDTO]):
    def __init__(self, event_repository: EventRepository):
        self._event_repository = event_repository

    async def execute(self, query: GetEventQuery) -> EventDTO:
        event = await self._event_repository.get_by_id(EventId(query.event_id))
        if not event:
            raise EntityNotFoundError("Event", query.event_id)
        return EventDTO.from_entity(event)
