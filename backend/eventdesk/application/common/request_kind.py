"""Enumerable identifiers of every request the dispatcher routes."""

from enum import Enum


class RequestKind(str, Enum):
    CREATE_EVENT = "create_event"
    CANCEL_EVENT = "cancel_event"
    GET_EVENT = "get_event"
    GET_EVENTS_LIST = "get_events_list"
    CREATE_REVIEW = "create_review"
    LIST_REVIEWS = "list_reviews"

    def __str__(self) -> str:
        return self.value
