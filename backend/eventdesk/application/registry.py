"""
HandlerRegistry - explicit map from RequestKind to handler factory + validator.

Built once at startup, then frozen. freeze() fails fast when any kind is
left without a handler, so a wiring mistake stops the application from
starting instead of surfacing on the first unlucky request.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Union

from eventdesk.application.common.errors import UnregisteredRequestTypeError
from eventdesk.application.common.interfaces import CommandHandler, QueryHandler
from eventdesk.application.common.request_kind import RequestKind
from eventdesk.application.common.validation import NO_RULES, Validator

Handler = Union[CommandHandler, QueryHandler]
HandlerFactory = Callable[[], Handler]


@dataclass(frozen=True)
class Registration:
    kind: RequestKind
    factory: HandlerFactory
    validator: Validator


class HandlerRegistry:
    def __init__(self, kinds: Iterable[RequestKind] = RequestKind):
        self._expected = tuple(kinds)
        self._registrations: Mapping[RequestKind, Registration] = {}
        self._frozen = False

    def register(
        self,
        kind: RequestKind,
        factory: HandlerFactory,
        validator: Optional[Validator] = None,
    ) -> "HandlerRegistry":
        if self._frozen:
            raise RuntimeError("Handler registry is frozen")
        if kind in self._registrations:
            raise ValueError(f"Handler already registered for {kind}")

        self._registrations[kind] = Registration(
            kind=kind, factory=factory, validator=validator or NO_RULES
        )
        return self

    def freeze(self) -> "HandlerRegistry":
        missing = [kind for kind in self._expected if kind not in self._registrations]
        if missing:
            raise UnregisteredRequestTypeError(missing)

        self._registrations = MappingProxyType(dict(self._registrations))
        self._frozen = True
        return self

    def resolve(self, kind: Optional[RequestKind]) -> Registration:
        registration = self._registrations.get(kind)
        if registration is None:
            raise UnregisteredRequestTypeError([kind])
        return registration

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def kinds(self) -> tuple[RequestKind, ...]:
        return tuple(self._registrations)
