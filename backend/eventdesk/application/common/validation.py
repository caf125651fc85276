"""
Request validation.

A Validator is a list of pure rules. Each rule looks at the request and
returns a FieldFailure or None. All rules run on every call; there is no
short-circuit on the first failure.

Rules never touch repositories, notifiers or the clock; anything that needs
stored state (duplicates, ownership) belongs in the handler.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from eventdesk.domain.value_objects.event_id import is_valid_uuid


@dataclass(frozen=True)
class FieldFailure:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    failures: tuple[FieldFailure, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.failures

    @property
    def messages(self) -> list[str]:
        return [failure.message for failure in self.failures]

    def by_field(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field, []).append(failure.message)
        return grouped


Rule = Callable[[Any], Optional[FieldFailure]]


class Validator:
    def __init__(self, *rules: Rule):
        self._rules = tuple(rules)

    def validate(self, request: Any) -> ValidationResult:
        failures = []
        for rule in self._rules:
            failure = rule(request)
            if failure is not None:
                failures.append(failure)
        return ValidationResult(tuple(failures))

    def __len__(self) -> int:
        return len(self._rules)


NO_RULES = Validator()


# ==================== RULE HELPERS ====================


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def required(name: str, message: Optional[str] = None) -> Rule:
    def rule(request: Any) -> Optional[FieldFailure]:
        if _blank(getattr(request, name, None)):
            return FieldFailure(name, message or f"{name} required")
        return None

    return rule


def in_range(name: str, low: int, high: int, message: Optional[str] = None) -> Rule:
    def rule(request: Any) -> Optional[FieldFailure]:
        value = getattr(request, name, None)
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not low <= value <= high
        ):
            return FieldFailure(
                name, message or f"{name} must be between {low} and {high}"
            )
        return None

    return rule


def max_length(name: str, limit: int, message: Optional[str] = None) -> Rule:
    def rule(request: Any) -> Optional[FieldFailure]:
        value = getattr(request, name, None)
        if isinstance(value, str) and len(value) > limit:
            return FieldFailure(
                name, message or f"{name} cannot exceed {limit} characters"
            )
        return None

    return rule


def matches(
    name: str,
    pattern: "re.Pattern[str]",
    message: Optional[str] = None,
    optional: bool = False,
) -> Rule:
    """Field must match pattern; with optional=True a missing value passes."""

    def rule(request: Any) -> Optional[FieldFailure]:
        value = getattr(request, name, None)
        if optional and _blank(value):
            return None
        if not isinstance(value, str) or not pattern.match(value):
            return FieldFailure(name, message or f"{name} is not valid")
        return None

    return rule


def check(name: str, predicate: Callable[[Any], bool], message: str) -> Rule:
    """Rule from an arbitrary predicate over the whole request."""

    def rule(request: Any) -> Optional[FieldFailure]:
        return None if predicate(request) else FieldFailure(name, message)

    return rule


def valid_uuid(name: str, message: Optional[str] = None) -> Rule:
    return check(
        name,
        lambda request: is_valid_uuid(getattr(request, name, None)),
        message or f"{name} must be a valid UUID",
    )
