"""
Pipeline behaviors - cross-cutting concerns wrapped around handler execution.

Behaviors run in registration order around the handler and only around it:
validation has already happened and post-commit hooks run afterwards, so
none of them can change the order of pipeline steps.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from eventdesk.application.common.errors import PIPELINE_ERRORS
from eventdesk.application.common.interfaces import Request
from eventdesk.observability.metrics import (
    MetricsDispatchOutcome,
    increment_dispatch,
    observe_dispatch_latency,
)

logger = logging.getLogger(__name__)

NextHandler = Callable[[], Awaitable[Any]]


class PipelineBehavior(ABC):
    @abstractmethod
    async def handle(self, request: Request, next_handler: NextHandler) -> Any:
        """Do work around next_handler() and return its response."""
        ...


class LoggingBehavior(PipelineBehavior):
    async def handle(self, request: Request, next_handler: NextHandler) -> Any:
        kind = request.kind.value
        logger.debug(f"Handling {kind}: {request!r}")
        try:
            response = await next_handler()
        except PIPELINE_ERRORS as e:
            logger.warning(f"{kind} failed: {type(e).__name__}: {e}")
            raise
        except Exception:
            logger.exception(f"{kind} raised an unexpected error")
            raise
        logger.info(f"{kind} handled")
        return response


class MetricsBehavior(PipelineBehavior):
    async def handle(self, request: Request, next_handler: NextHandler) -> Any:
        kind = request.kind.value
        start = time.perf_counter()
        try:
            response = await next_handler()
        except Exception as e:
            increment_dispatch(kind, type(e).__name__)
            raise
        finally:
            observe_dispatch_latency(kind, time.perf_counter() - start)
        increment_dispatch(kind, MetricsDispatchOutcome.OK)
        return response


def default_behaviors() -> list[PipelineBehavior]:
    return [LoggingBehavior(), MetricsBehavior()]
