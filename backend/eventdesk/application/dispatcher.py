"""
Dispatcher - the single entry point of the application layer.

Flow for every request:
  resolve registration by request.kind
    → validate (all rules)        ── invalid → ValidationFailedError, handler never built
    → handler.execute()           ── wrapped by behaviors (logging, metrics)
    → post-commit hooks           ── only after the handler returned
    → response

The dispatcher keeps no per-request state: the registry is frozen and each
dispatch gets its own handler instance and PostCommit, so one instance can
serve concurrent requests.
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Generic, Optional, Sequence, TypeVar

from eventdesk.application.behaviors import PipelineBehavior
from eventdesk.application.common.errors import (
    PIPELINE_ERRORS,
    ValidationFailedError,
)
from eventdesk.application.common.interfaces import CommandHandler, Request
from eventdesk.application.common.post_commit import PostCommit
from eventdesk.application.notification_dispatcher import NotificationDispatcher
from eventdesk.application.registry import HandlerRegistry
from eventdesk.observability.metrics import (
    MetricsDispatchOutcome,
    increment_dispatch,
    increment_validation_failures,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DispatchOutcome(Generic[T]):
    """Result-shaped dispatch: exactly one of response / failure is meaningful."""

    response: Optional[T] = None
    failure: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def validation_failed(self) -> bool:
        return isinstance(self.failure, ValidationFailedError)


class Dispatcher:
    def __init__(
        self,
        registry: HandlerRegistry,
        notifications: NotificationDispatcher,
        behaviors: Sequence[PipelineBehavior] = (),
    ):
        if not registry.frozen:
            raise RuntimeError("Handler registry must be frozen before dispatching")
        self._registry = registry
        self._notifications = notifications
        self._behaviors = tuple(behaviors)

    async def dispatch(self, request: Request[T]) -> T:
        """Run the pipeline; raise the typed error of whichever step failed."""
        kind = getattr(request, "kind", None)
        registration = self._registry.resolve(kind)

        result = registration.validator.validate(request)
        if not result.is_valid:
            increment_dispatch(kind.value, MetricsDispatchOutcome.VALIDATION_FAILED)
            increment_validation_failures(
                kind.value, [failure.field for failure in result.failures]
            )
            logger.info(f"{kind.value} rejected by validation: {result.messages}")
            raise ValidationFailedError(kind, result)

        handler = registration.factory()
        post_commit = PostCommit()

        if isinstance(handler, CommandHandler):
            pipeline = partial(handler.execute, request, post_commit)
        else:
            pipeline = partial(handler.execute, request)
        for behavior in reversed(self._behaviors):
            pipeline = partial(behavior.handle, request, pipeline)

        response = await pipeline()

        if post_commit:
            logger.debug(f"{kind.value} queued {len(post_commit)} post-commit hook(s)")
            await self._notifications.run(post_commit.hooks)
        return response

    async def execute(self, request: Request[T]) -> DispatchOutcome[T]:
        """Like dispatch(), but pipeline errors come back as a failed outcome."""
        try:
            response = await self.dispatch(request)
        except PIPELINE_ERRORS as e:
            return DispatchOutcome(failure=e)
        return DispatchOutcome(response=response)
