"""
Prisma persistence provider.

Requires a generated client: `prisma generate --schema backend/prisma/schema.prisma`.
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from eventdesk.domain.ports.repositories import EventRepository, ReviewRepository
from eventdesk.infrastructure.persistence.prisma_event_repository import (
    PrismaEventRepository,
)
from eventdesk.infrastructure.persistence.prisma_review_repository import (
    PrismaReviewRepository,
)


class PrismaPersistenceProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - connected once when first requested, disconnected on container close
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.APP)
    def get_event_repository(self, prisma: Prisma) -> EventRepository:
        return PrismaEventRepository(prisma)

    @provide(scope=Scope.APP)
    def get_review_repository(self, prisma: Prisma) -> ReviewRepository:
        return PrismaReviewRepository(prisma)
