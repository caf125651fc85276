"""NotificationDispatcher - bounded retries, drop policy and isolation."""

import asyncio

import pytest

from eventdesk.application.common.post_commit import PostCommit
from eventdesk.application.notification_dispatcher import NotificationDispatcher
from eventdesk.domain.value_objects import (
    DeliveryResult,
    NotificationMessage,
    Recipient,
    UserEmail,
)
from fakes import ATTENDEE, FakeNotifier


def _hooks(*notifiers):
    post_commit = PostCommit()
    post_commit.notify(
        notifiers,
        NotificationMessage(
            recipient=Recipient(email=UserEmail(ATTENDEE)),
            subject="Hello",
            body="Body",
        ),
    )
    return post_commit.hooks


@pytest.fixture()
def notifications():
    return NotificationDispatcher(max_attempts=3, backoff_seconds=0, timeout_seconds=1)


@pytest.mark.asyncio
async def test_delivers_on_first_attempt(notifications):
    notifier = FakeNotifier()
    (hook,) = _hooks(notifier)

    assert await notifications.deliver(hook) is True
    assert len(notifier.messages) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("first", ["fail", "raise"])
async def test_retries_until_delivered(notifications, first):
    notifier = FakeNotifier(script=(first, first, "ok"))
    (hook,) = _hooks(notifier)

    assert await notifications.deliver(hook) is True
    assert len(notifier.messages) == 3


@pytest.mark.asyncio
async def test_drops_after_max_attempts(notifications, caplog):
    notifier = FakeNotifier(script=("raise",))
    (hook,) = _hooks(notifier)

    with caplog.at_level("ERROR", logger="eventdesk.application.notification_dispatcher"):
        assert await notifications.deliver(hook) is False

    assert len(notifier.messages) == 3
    assert any("dropped after 3 attempts" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_skip_is_final(notifications):
    notifier = FakeNotifier("sms", script=("skip",))
    (hook,) = _hooks(notifier)

    assert await notifications.deliver(hook) is False
    assert len(notifier.messages) == 1


@pytest.mark.asyncio
async def test_slow_attempt_times_out_and_is_retried():
    attempts = []

    async def slow_then_fast():
        attempts.append(len(attempts))
        if len(attempts) == 1:
            await asyncio.sleep(5)
        return DeliveryResult.sent("email")

    post_commit = PostCommit()
    post_commit.add("email:slow", "email", slow_then_fast)
    notifications = NotificationDispatcher(
        max_attempts=2, backoff_seconds=0, timeout_seconds=0.05
    )

    assert await notifications.deliver(post_commit.hooks[0]) is True
    assert len(attempts) == 2


@pytest.mark.asyncio
async def test_one_failing_channel_does_not_affect_others(notifications):
    broken = FakeNotifier("sms", script=("raise",))
    healthy = FakeNotifier("email")

    await notifications.run(_hooks(broken, healthy))

    assert len(broken.messages) == 3
    assert len(healthy.messages) == 1


@pytest.mark.asyncio
async def test_run_without_hooks_is_a_no_op(notifications):
    await notifications.run(())
    assert notifications.pending_count == 0


@pytest.mark.asyncio
async def test_detached_run_returns_before_delivery_and_drain_waits():
    release = asyncio.Event()
    delivered = []

    async def gated():
        await release.wait()
        delivered.append(True)
        return DeliveryResult.sent("email")

    post_commit = PostCommit()
    post_commit.add("email:gated", "email", gated)
    notifications = NotificationDispatcher(
        backoff_seconds=0, timeout_seconds=None, detached=True
    )

    await notifications.run(post_commit.hooks)
    assert notifications.detached
    assert notifications.pending_count == 1
    assert delivered == []

    release.set()
    await notifications.drain()

    assert delivered == [True]
    assert notifications.pending_count == 0


def test_max_attempts_must_be_positive():
    with pytest.raises(ValueError):
        NotificationDispatcher(max_attempts=0)


@pytest.mark.asyncio
async def test_non_delivery_result_counts_as_failed_attempt(notifications):
    attempts = []

    async def returns_bool():
        attempts.append(True)
        return False

    post_commit = PostCommit()
    post_commit.add("email:bool", "email", returns_bool)

    assert await notifications.deliver(post_commit.hooks[0]) is False
    assert len(attempts) == 3


@pytest.mark.asyncio
async def test_cancellation_is_not_retried(notifications):
    attempts = []

    async def cancelled():
        attempts.append(True)
        raise asyncio.CancelledError()

    post_commit = PostCommit()
    post_commit.add("email:cancelled", "email", cancelled)

    with pytest.raises(asyncio.CancelledError):
        await notifications.deliver(post_commit.hooks[0])
    assert len(attempts) == 1


@pytest.mark.asyncio
async def test_backoff_doubles_between_attempts():
    loop = asyncio.get_running_loop()
    notifier = FakeNotifier(script=("fail",))
    (hook,) = _hooks(notifier)
    notifications = NotificationDispatcher(
        max_attempts=3, backoff_seconds=0.05, timeout_seconds=1
    )

    started = loop.time()
    assert await notifications.deliver(hook) is False

    # 0.05 before the second attempt, 0.1 before the third
    assert loop.time() - started >= 0.14
    assert len(notifier.messages) == 3
