"""Handler registry - explicit, complete and frozen before use.

Tests cover:
    - freeze() fails fast listing every kind without a handler
    - duplicate and post-freeze registrations are rejected
    - the dispatcher refuses an unfrozen registry
    - an unknown request kind is reported, not silently ignored
"""

from dataclasses import dataclass

import pytest

from eventdesk.application.common.errors import UnregisteredRequestTypeError
from eventdesk.application.common.request_kind import RequestKind
from eventdesk.application.dispatcher import Dispatcher
from eventdesk.application.notification_dispatcher import NotificationDispatcher
from eventdesk.application.queries.events import GetEventsListHandler
from eventdesk.application.registry import HandlerRegistry
from eventdesk.infrastructure.persistence import (
    InMemoryEventRepository,
    InMemoryReviewRepository,
)
from eventdesk.setup.ioc import build_registry


def _factory():
    return GetEventsListHandler(InMemoryEventRepository())


def test_freeze_reports_missing_kinds():
    registry = HandlerRegistry().register(RequestKind.GET_EVENTS_LIST, _factory)

    with pytest.raises(UnregisteredRequestTypeError) as exc_info:
        registry.freeze()

    missing = set(exc_info.value.kinds)
    assert RequestKind.GET_EVENTS_LIST not in missing
    assert missing == set(RequestKind) - {RequestKind.GET_EVENTS_LIST}
    assert not registry.frozen


def test_freeze_with_restricted_kind_set():
    registry = HandlerRegistry(kinds=[RequestKind.GET_EVENTS_LIST])
    registry.register(RequestKind.GET_EVENTS_LIST, _factory).freeze()

    assert registry.frozen
    assert registry.kinds == (RequestKind.GET_EVENTS_LIST,)


def test_duplicate_registration_rejected():
    registry = HandlerRegistry().register(RequestKind.GET_EVENTS_LIST, _factory)

    with pytest.raises(ValueError):
        registry.register(RequestKind.GET_EVENTS_LIST, _factory)


def test_registration_after_freeze_rejected():
    registry = HandlerRegistry(kinds=[RequestKind.GET_EVENTS_LIST])
    registry.register(RequestKind.GET_EVENTS_LIST, _factory).freeze()

    with pytest.raises(RuntimeError):
        registry.register(RequestKind.GET_EVENT, _factory)


def test_default_wiring_covers_every_kind():
    registry = build_registry(InMemoryEventRepository(), InMemoryReviewRepository())

    assert registry.frozen
    assert set(registry.kinds) == set(RequestKind)


def test_dispatcher_requires_frozen_registry():
    with pytest.raises(RuntimeError):
        Dispatcher(HandlerRegistry(), NotificationDispatcher())


@dataclass(frozen=True)
class NotARequest:
    value: int = 1


@pytest.mark.asyncio
async def test_dispatch_of_unknown_request_raises(dispatcher):
    with pytest.raises(UnregisteredRequestTypeError):
        await dispatcher.dispatch(NotARequest())


@pytest.mark.asyncio
async def test_execute_does_not_hide_wiring_defects(dispatcher):
    with pytest.raises(UnregisteredRequestTypeError):
        await dispatcher.execute(NotARequest())
