"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class CreateReviewCommand(Command[ReviewId]):
        kind: ClassVar[RequestKind] = RequestKind.CREATE_REVIEW
        event_id: str
        rating: int
        comment: str

    class CreateReviewHandler(CommandHandler[ReviewId]):
        def __init__(self, reviews: ReviewRepository, notifiers: Sequence[NotificationPort]):
            self._reviews = reviews
            self._notifiers = notifiers

        async def execute(self, cmd: CreateReviewCommand, post_commit: PostCommit) -> ReviewId:
            review = Review.create(...)
            await self._reviews.add(review)
            post_commit.notify(self._notifiers, message)
            return review.id

Command handlers receive the dispatch's PostCommit so that side effects run
only once the write has succeeded. Query handlers never see it.
"""
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from eventdesk.application.common.post_commit import PostCommit
from eventdesk.application.common.request_kind import RequestKind

T = TypeVar("T")


class Request(ABC, Generic[T]):
    """Base class for everything the dispatcher routes"""

    kind: ClassVar[RequestKind]


class Command(Request[T]):
    """Base class for write operations"""
    pass


class Query(Request[T]):
    """Base class for read operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T], post_commit: PostCommit) -> T:
        """Execute the command and return a result of type T"""
        ...


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
