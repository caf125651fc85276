"""Get Events List Query."""

from dataclasses import dataclass
from typing import ClassVar

from eventdesk.application.common.interfaces import Query, QueryHandler
from eventdesk.application.common.request_kind import RequestKind
from eventdesk.application.common.validation import Validator, in_range
from eventdesk.application.dto.event import EventSummaryDTO
from eventdesk.domain.ports.repositories import EventRepository


@dataclass(frozen=True)
class GetEventsListQuery(Query[list[EventSummaryDTO]]):
    kind: ClassVar[RequestKind] = RequestKind.GET_EVENTS_LIST

    limit: int = 50
    include_cancelled: bool = False


VALIDATOR = Validator(in_range("limit", 1, 200))


class GetEventsListHandler(QueryHandler[list[EventSummaryDTO]]):
    def __init__(self, event_repository: EventRepository):
        self._event_repository = event_repository

    async def execute(self, query: GetEventsListQuery) -> list[EventSummaryDTO]:
        events = await self._event_repository.list(
            query.limit, include_cancelled=query.include_cancelled
        )
        return [EventSummaryDTO.from_entity(event) for event in events]
