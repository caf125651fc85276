"""
Pipeline errors raised by the dispatcher itself.

ValidationFailedError - caller input defect. Maps to: HTTP 400 Bad Request.
    Not a subclass of any domain.exceptions error.
UnregisteredRequestTypeError - wiring defect. Raised while freezing the
    handler registry at startup; reaching it per request means the
    registry was bypassed.
"""

from typing import Iterable

from eventdesk.application.common.request_kind import RequestKind
from eventdesk.application.common.validation import ValidationResult
from eventdesk.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    EntityNotFoundError,
    PersistenceError,
)


class ValidationFailedError(Exception):
    """Raised when a request fails validation; the handler was never invoked."""

    def __init__(self, kind: RequestKind, result: ValidationResult):
        super().__init__(
            f"{kind.value} request failed validation: " + "; ".join(result.messages)
        )
        self.kind = kind
        self.result = result

    @property
    def errors(self) -> list[dict]:
        return [
            {"field": failure.field, "message": failure.message}
            for failure in self.result.failures
        ]


class UnregisteredRequestTypeError(Exception):
    """Raised when one or more request kinds have no handler."""

    def __init__(self, kinds: Iterable[object]):
        self.kinds = tuple(kinds)
        names = ", ".join(str(kind) for kind in self.kinds)
        super().__init__(f"No handler registered for request kind(s): {names}")


# Errors Dispatcher.execute() turns into a failed outcome; anything else propagates.
PIPELINE_ERRORS: tuple[type[Exception], ...] = (
    ValidationFailedError,
    EntityNotFoundError,
    ConflictError,
    AccessDeniedError,
    PersistenceError,
)
