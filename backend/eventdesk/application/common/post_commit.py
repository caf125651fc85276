"""
Post-commit hooks.

A command handler registers side effects here once its repository write has
succeeded. The dispatcher hands the collected hooks to the
NotificationDispatcher only if the handler returned normally; if the handler
raises, the hooks are thrown away with it.
"""

from dataclasses import dataclass
from functools import partial
from typing import Awaitable, Callable, Iterable

from eventdesk.domain.ports.notification_port import NotificationPort
from eventdesk.domain.value_objects.notification_message import (
    DeliveryResult,
    NotificationMessage,
)

SideEffect = Callable[[], Awaitable[DeliveryResult]]


@dataclass(frozen=True)
class PostCommitHook:
    name: str
    channel: str
    effect: SideEffect


class PostCommit:
    def __init__(self):
        self._hooks: list[PostCommitHook] = []

    def add(self, name: str, channel: str, effect: SideEffect) -> None:
        self._hooks.append(PostCommitHook(name=name, channel=channel, effect=effect))

    def notify(
        self, notifiers: Iterable[NotificationPort], message: NotificationMessage
    ) -> None:
        """Queue the same message on every notifier."""
        for notifier in notifiers:
            self.add(
                name=f"{notifier.channel}:{message.subject}",
                channel=notifier.channel,
                effect=partial(notifier.send, message),
            )

    @property
    def hooks(self) -> tuple[PostCommitHook, ...]:
        return tuple(self._hooks)

    def __len__(self) -> int:
        return len(self._hooks)
