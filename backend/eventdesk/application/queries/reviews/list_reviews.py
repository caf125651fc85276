"""
List Reviews Query.

Returns the reviews of one event, oldest first. An unknown event is a
404 rather than an empty list.
"""

from dataclasses import dataclass
from typing import ClassVar

from eventdesk.application.common.interfaces import Query, QueryHandler
from eventdesk.application.common.request_kind import RequestKind
from eventdesk.application.common.validation import Validator, valid_uuid
from eventdesk.application.dto.review import ReviewDTO
from eventdesk.domain.exceptions import EntityNotFoundError
from eventdesk.domain.ports.repositories import EventRepository, ReviewRepository
from eventdesk.domain.value_objects.event_id import EventId


@dataclass(frozen=True)
class ListReviewsQuery(Query[list[ReviewDTO]]):
    kind: ClassVar[RequestKind] = RequestKind.LIST_REVIEWS

    event_id: str


VALIDATOR = Validator(valid_uuid("event_id"))


class ListReviewsHandler(QueryHandler[list[ReviewDTO]]):
    def __init__(
        self, event_repository: EventRepository, review_repository: ReviewRepository
    ):
        self._event_repository = event_repository
        self._review_repository = review_repository

    async def execute(self, query: ListReviewsQuery) -> list[ReviewDTO]:
        event_id = EventId(query.event_id)
        if not await self._event_repository.get_by_id(event_id):
            raise EntityNotFoundError("Event", event_id.value)

        reviews = await self._review_repository.list_by_event(event_id)
        return [ReviewDTO.from_entity(review) for review in reviews]
