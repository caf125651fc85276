"""
EventId Value Object - UUID wrapper for event identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


def is_valid_uuid(value: str) -> bool:
    """Check if string is a valid UUID."""
    try:
        UUID(value)
        return True
    except (ValueError, TypeError, AttributeError):
        return False


@dataclass(frozen=True)
class EventId:
    value: str  # event_id, presented as UUID string

    def __post_init__(self):
        if not is_valid_uuid(self.value):
            raise ValueError(f"Invalid event ID (UUID): {self.value}")

    @classmethod
    def new(cls) -> "EventId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
