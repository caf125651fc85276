"""Shared fixtures for the EventDesk test suite; fakes live in fakes.py."""

import pytest

from eventdesk.application.behaviors import default_behaviors
from eventdesk.application.dispatcher import Dispatcher
from eventdesk.application.notification_dispatcher import NotificationDispatcher
from eventdesk.setup.ioc import build_registry
from fakes import FakeNotifier, SpyEventRepository, SpyReviewRepository


@pytest.fixture()
def calls() -> list:
    return []


@pytest.fixture()
def event_repository(calls):
    return SpyEventRepository(calls)


@pytest.fixture()
def review_repository(calls):
    return SpyReviewRepository(calls)


@pytest.fixture()
def notifier(calls):
    return FakeNotifier("email", calls=calls)


@pytest.fixture()
def notifications():
    return NotificationDispatcher(max_attempts=3, backoff_seconds=0, timeout_seconds=1)


@pytest.fixture()
def dispatcher(event_repository, review_repository, notifier, notifications):
    registry = build_registry(event_repository, review_repository, [notifier])
    return Dispatcher(registry, notifications, default_behaviors())
