"""
NotificationDispatcher - runs post-commit hooks with failure isolation.

Policy for every hook:
- each attempt is bounded by timeout_seconds
- a raised exception, a failed DeliveryResult or anything that is not a
  DeliveryResult counts as a failed attempt
- failed attempts are retried by tenacity with exponential backoff
  (backoff_seconds * 2 ** (attempt - 1)) up to max_attempts in total
- after the last failed attempt the message is dropped: logged at ERROR and
  counted in eventdesk_notifications_dropped_total, never retried again
- a skipped result (recipient has no address on that channel) is final
- task cancellation is never retried

Nothing a hook does ever reaches the dispatch caller. In detached mode the
hooks run as background tasks and drain() waits for the stragglers
(the IoC container calls it on shutdown).
"""

import asyncio
import logging
from typing import Optional, Sequence

from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from eventdesk.application.common.post_commit import PostCommitHook
from eventdesk.domain.exceptions import NotificationError
from eventdesk.domain.value_objects.notification_message import DeliveryResult
from eventdesk.observability.metrics import (
    MetricsNotificationOutcome,
    increment_notification_attempt,
    increment_notification_dropped,
)

logger = logging.getLogger(__name__)


def _undelivered(result: DeliveryResult) -> bool:
    return not result.delivered and not result.skipped


class NotificationDispatcher:
    def __init__(
        self,
        max_attempts: int = 3,
        backoff_seconds: float = 0.5,
        timeout_seconds: Optional[float] = 10.0,
        detached: bool = False,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._max_attempts = max_attempts
        self._backoff_seconds = backoff_seconds
        self._timeout_seconds = timeout_seconds
        self._detached = detached
        self._pending: set[asyncio.Task] = set()

    @property
    def detached(self) -> bool:
        return self._detached

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def run(self, hooks: Sequence[PostCommitHook]) -> None:
        if not hooks:
            return

        if self._detached:
            for hook in hooks:
                task = asyncio.create_task(self.deliver(hook), name=hook.name)
                self._pending.add(task)
                task.add_done_callback(self._on_task_done)
            return

        results = await asyncio.gather(
            *(self.deliver(hook) for hook in hooks), return_exceptions=True
        )
        for hook, result in zip(hooks, results):
            if isinstance(result, BaseException):
                logger.error(
                    f"Notification {hook.name} escaped its retry policy: {result!r}"
                )

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error(
                f"Notification {task.get_name()} escaped its retry policy: "
                f"{task.exception()!r}"
            )

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=self._backoff_seconds),
            retry=retry_if_exception_type(Exception) | retry_if_result(_undelivered),
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )

    async def _attempt(self, hook: PostCommitHook) -> DeliveryResult:
        """One bounded call of the hook; records the attempt outcome."""
        try:
            result = await asyncio.wait_for(hook.effect(), self._timeout_seconds)
            if not isinstance(result, DeliveryResult):
                raise NotificationError(
                    hook.channel,
                    f"port returned {type(result).__name__}, not a DeliveryResult",
                )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            increment_notification_attempt(hook.channel, MetricsNotificationOutcome.FAILED)
            logger.warning(f"Notification {hook.name} raised {type(e).__name__}: {e}")
            raise

        if result.delivered:
            increment_notification_attempt(hook.channel, MetricsNotificationOutcome.DELIVERED)
        elif result.skipped:
            increment_notification_attempt(hook.channel, MetricsNotificationOutcome.SKIPPED)
        else:
            increment_notification_attempt(hook.channel, MetricsNotificationOutcome.FAILED)
            logger.warning(f"Notification {hook.name} failed: {result.error}")
        return result

    async def deliver(self, hook: PostCommitHook) -> bool:
        """Run one hook under the retry policy. Returns True once delivered."""
        try:
            result = await self._retrying()(self._attempt, hook)
        except RetryError as e:
            last = e.last_attempt
            error = last.exception() or last.result().error
            increment_notification_dropped(hook.channel)
            logger.error(
                f"Notification {hook.name} dropped after "
                f"{last.attempt_number} attempts: {error}"
            )
            return False

        if result.skipped:
            logger.debug(f"Notification {hook.name} skipped: {result.error}")
            return False
        logger.info(f"Notification {hook.name} delivered")
        return True

    async def drain(self) -> None:
        """Wait for every detached hook still in flight."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
