"""Event commands."""

from .create_event import (
    CreateEventCommand,
    CreateEventHandler,
    VALIDATOR as CREATE_EVENT_VALIDATOR,
)
from .cancel_event import (
    CancelEventCommand,
    CancelEventHandler,
    VALIDATOR as CANCEL_EVENT_VALIDATOR,
)

__all__ = [
    "CreateEventCommand",
    "CreateEventHandler",
    "CREATE_EVENT_VALIDATOR",
    "CancelEventCommand",
    "CancelEventHandler",
    "CANCEL_EVENT_VALIDATOR",
]
