"""Event-related queries."""

from eventdesk.application.queries.events.get_event import (
    GetEventQuery,
    GetEventHandler,
    VALIDATOR as GET_EVENT_VALIDATOR,
)
from eventdesk.application.queries.events.get_events_list import (
    GetEventsListQuery,
    GetEventsListHandler,
    VALIDATOR as GET_EVENTS_LIST_VALIDATOR,
)

__all__ = [
    "GetEventQuery",
    "GetEventHandler",
    "GET_EVENT_VALIDATOR",
    "GetEventsListQuery",
    "GetEventsListHandler",
    "GET_EVENTS_LIST_VALIDATOR",
]
