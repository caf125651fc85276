"""
Dishka DI Container Setup.

- Registers all dependencies (repositories, notifiers, registry, dispatcher)
- Maps abstract ports to concrete implementations
- Everything is Scope.APP: handlers are built per dispatch by the frozen
  HandlerRegistry, not by the container

Flow:
  Container → provides → InMemoryEventRepository ─┐
                         EmailNotifier/SmsNotifier ├─► HandlerRegistry (frozen) ─► Dispatcher
                         NotificationDispatcher ───┘
"""

import logging
from dataclasses import dataclass
from typing import AsyncIterable, Iterator, Optional, Sequence

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from eventdesk.application.behaviors import default_behaviors
from eventdesk.application.commands.events import (
    CANCEL_EVENT_VALIDATOR,
    CREATE_EVENT_VALIDATOR,
    CancelEventHandler,
    CreateEventHandler,
)
from eventdesk.application.commands.reviews import (
    CREATE_REVIEW_VALIDATOR,
    CreateReviewHandler,
)
from eventdesk.application.common.request_kind import RequestKind
from eventdesk.application.dispatcher import Dispatcher
from eventdesk.application.notification_dispatcher import NotificationDispatcher
from eventdesk.application.queries.events import (
    GET_EVENT_VALIDATOR,
    GET_EVENTS_LIST_VALIDATOR,
    GetEventHandler,
    GetEventsListHandler,
)
from eventdesk.application.queries.reviews import (
    LIST_REVIEWS_VALIDATOR,
    ListReviewsHandler,
)
from eventdesk.application.registry import HandlerRegistry
from eventdesk.config.settings import Config
from eventdesk.domain.ports.notification_port import NotificationPort
from eventdesk.domain.ports.repositories import EventRepository, ReviewRepository
from eventdesk.infrastructure.notifications import (
    EmailNotifier,
    SlackNotifier,
    SmsNotifier,
)
from eventdesk.infrastructure.persistence import (
    InMemoryEventRepository,
    InMemoryReviewRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationChannels:
    """The configured notifier ports, handed to every mutating handler."""

    ports: tuple[NotificationPort, ...] = ()

    def __iter__(self) -> Iterator[NotificationPort]:
        return iter(self.ports)


def build_notifiers(config=Config) -> list[NotificationPort]:
    notifiers: list[NotificationPort] = []
    for channel in config.NOTIFICATION_CHANNELS:
        if channel == "email":
            notifiers.append(
                EmailNotifier(
                    smtp_server=config.SMTP_SERVER,
                    smtp_port=config.SMTP_PORT,
                    smtp_user=config.SMTP_USER,
                    smtp_password=config.SMTP_PASSWORD,
                    sender=config.SMTP_SENDER or None,
                )
            )
        elif channel == "sms":
            if not config.SMS_GATEWAY_URL:
                logger.warning("SMS channel enabled but SMS_GATEWAY_URL is empty; skipping")
                continue
            notifiers.append(
                SmsNotifier(
                    gateway_url=config.SMS_GATEWAY_URL,
                    api_key=config.SMS_API_KEY,
                    sender_id=config.SMS_SENDER_ID,
                )
            )
        elif channel == "slack":
            notifiers.append(
                SlackNotifier(
                    token=config.SLACK_BOT_TOKEN,
                    default_channel=config.SLACK_DEFAULT_CHANNEL or None,
                )
            )
        else:
            raise ValueError(f"Unknown notification channel: {channel}")
    return notifiers


def build_registry(
    events: EventRepository,
    reviews: ReviewRepository,
    notifiers: Sequence[NotificationPort] = (),
) -> HandlerRegistry:
    """One registration per RequestKind; freeze() refuses to return otherwise."""
    notifiers = tuple(notifiers)
    return (
        HandlerRegistry()
        .register(
            RequestKind.CREATE_EVENT,
            lambda: CreateEventHandler(events, notifiers),
            CREATE_EVENT_VALIDATOR,
        )
        .register(
            RequestKind.CANCEL_EVENT,
            lambda: CancelEventHandler(events, reviews, notifiers),
            CANCEL_EVENT_VALIDATOR,
        )
        .register(
            RequestKind.GET_EVENT,
            lambda: GetEventHandler(events),
            GET_EVENT_VALIDATOR,
        )
        .register(
            RequestKind.GET_EVENTS_LIST,
            lambda: GetEventsListHandler(events),
            GET_EVENTS_LIST_VALIDATOR,
        )
        .register(
            RequestKind.CREATE_REVIEW,
            lambda: CreateReviewHandler(events, reviews, notifiers),
            CREATE_REVIEW_VALIDATOR,
        )
        .register(
            RequestKind.LIST_REVIEWS,
            lambda: ListReviewsHandler(events, reviews),
            LIST_REVIEWS_VALIDATOR,
        )
        .freeze()
    )


class AppProvider(Provider):
    """
    Application dependency provider.

    Pass notifiers to bypass the configured channels (tests, scripts).
    """

    def __init__(
        self, config=Config, notifiers: Optional[Sequence[NotificationPort]] = None
    ):
        super().__init__()
        self._config = config
        self._notifiers = notifiers

    # ==================== NOTIFIERS ====================

    @provide(scope=Scope.APP)
    async def get_notification_channels(self) -> AsyncIterable[NotificationChannels]:
        if self._notifiers is not None:
            yield NotificationChannels(tuple(self._notifiers))
            return

        ports = build_notifiers(self._config)
        logger.info(f"Notification channels: {[port.channel for port in ports]}")
        yield NotificationChannels(tuple(ports))
        for port in ports:
            if isinstance(port, SmsNotifier):
                await port.aclose()

    @provide(scope=Scope.APP)
    async def get_notification_dispatcher(
        self, channels: NotificationChannels
    ) -> AsyncIterable[NotificationDispatcher]:
        # depends on channels so that draining happens before they close
        notifications = NotificationDispatcher(
            max_attempts=self._config.NOTIFY_MAX_ATTEMPTS,
            backoff_seconds=self._config.NOTIFY_BACKOFF_SECONDS,
            timeout_seconds=self._config.NOTIFY_TIMEOUT_SECONDS,
            detached=self._config.NOTIFY_DETACHED,
        )
        yield notifications
        await notifications.drain()

    # ==================== PIPELINE ====================

    @provide(scope=Scope.APP)
    def get_handler_registry(
        self,
        event_repository: EventRepository,
        review_repository: ReviewRepository,
        channels: NotificationChannels,
    ) -> HandlerRegistry:
        return build_registry(event_repository, review_repository, channels.ports)

    @provide(scope=Scope.APP)
    def get_dispatcher(
        self, registry: HandlerRegistry, notifications: NotificationDispatcher
    ) -> Dispatcher:
        return Dispatcher(registry, notifications, default_behaviors())


class MemoryPersistenceProvider(Provider):
    """In-process repositories; state lives as long as the container."""

    @provide(scope=Scope.APP)
    def get_event_repository(self) -> EventRepository:
        return InMemoryEventRepository()

    @provide(scope=Scope.APP)
    def get_review_repository(self) -> ReviewRepository:
        return InMemoryReviewRepository()


def create_container(
    config=Config,
    notifiers: Optional[Sequence[NotificationPort]] = None,
) -> AsyncContainer:
    """
    Create and configure the DI container.

    - Call this ONCE at app startup
    - PERSISTENCE_BACKEND picks the repository provider; the Prisma one is
      imported only when selected
    """
    backend = config.PERSISTENCE_BACKEND
    if backend == "memory":
        persistence: Provider = MemoryPersistenceProvider()
    elif backend == "prisma":
        from eventdesk.setup.ioc.prisma_provider import PrismaPersistenceProvider

        persistence = PrismaPersistenceProvider()
    else:
        raise ValueError(f"Unknown PERSISTENCE_BACKEND: {backend}")

    return make_async_container(AppProvider(config, notifiers), persistence)
