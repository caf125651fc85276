"""
ReviewId Value Object - UUID wrapper for review identity.
"""

from dataclasses import dataclass
from uuid import uuid4

from eventdesk.domain.value_objects.event_id import is_valid_uuid


@dataclass(frozen=True)
class ReviewId:
    value: str  # review_id, presented as UUID string

    def __post_init__(self):
        if not is_valid_uuid(self.value):
            raise ValueError(f"Invalid review ID (UUID): {self.value}")

    @classmethod
    def new(cls) -> "ReviewId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
