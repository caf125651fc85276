"""
Events API Router - FastAPI endpoints for events.

- Receives the Dispatcher via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Pipeline errors are translated in presentation/api/errors.py

Flow:
  HTTP Request → Router → Command/Query → Dispatcher → Handler → Repository
                                                                    ↓
  HTTP Response ← Router ← DTO ←──────────────────────────────── Result
"""

from datetime import datetime
from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, status
from pydantic import BaseModel

from eventdesk.application.commands.events import (
    CancelEventCommand,
    CreateEventCommand,
)
from eventdesk.application.dispatcher import Dispatcher
from eventdesk.application.dto.event import EventDTO, EventSummaryDTO
from eventdesk.application.queries.events import GetEventQuery, GetEventsListQuery

logger = getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateEventRequest(BaseModel):
    title: str
    venue: str
    starts_at: datetime
    capacity: int
    organizer_email: str
    description: str = ""
    organizer_phone: Optional[str] = None


class CreateEventResponse(BaseModel):
    id: str


class CancelEventRequest(BaseModel):
    requested_by: str
    reason: str = ""


class ListEventsResponse(BaseModel):
    events: list[EventSummaryDTO]
    total: int


# ==================== ENDPOINTS ====================


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateEventResponse)
@inject
async def create_event(
    body: CreateEventRequest, dispatcher: FromDishka[Dispatcher]
) -> CreateEventResponse:
    event_id = await dispatcher.dispatch(CreateEventCommand(**body.model_dump()))
    logger.info(f"Event {event_id.value} created by {body.organizer_email}")
    return CreateEventResponse(id=event_id.value)


@router.get("", response_model=ListEventsResponse)
@inject
async def list_events(
    dispatcher: FromDishka[Dispatcher],
    limit: int = 50,
    include_cancelled: bool = False,
) -> ListEventsResponse:
    events = await dispatcher.dispatch(
        GetEventsListQuery(limit=limit, include_cancelled=include_cancelled)
    )
    return ListEventsResponse(events=events, total=len(events))


@router.get("/{event_id}", response_model=EventDTO)
@inject
async def get_event(event_id: str, dispatcher: FromDishka[Dispatcher]) -> EventDTO:
    return await dispatcher.dispatch(GetEventQuery(event_id=event_id))


@router.post("/{event_id}/cancel", response_model=EventDTO)
@inject
async def cancel_event(
    event_id: str, body: CancelEventRequest, dispatcher: FromDishka[Dispatcher]
) -> EventDTO:
    return await dispatcher.dispatch(
        CancelEventCommand(
            event_id=event_id, requested_by=body.requested_by, reason=body.reason
        )
    )
