"""
Persistence Layer - Repository implementations.

In-memory repositories are imported here; the Prisma ones are imported
explicitly by the Prisma IoC provider so that a generated Prisma client is only
required when that backend is selected.
"""

from eventdesk.infrastructure.persistence.memory_event_repository import (
    InMemoryEventRepository,
)
from eventdesk.infrastructure.persistence.memory_review_repository import (
    InMemoryReviewRepository,
)

__all__ = [
    "InMemoryEventRepository",
    "InMemoryReviewRepository",
]
