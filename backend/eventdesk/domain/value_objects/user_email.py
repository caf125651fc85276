"""
UserEmail Value Object - Wraps user email with validation.
"""

import re
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class UserEmail:
    value: str  # user_email, presented as email

    def __post_init__(self):
        if not self.value or not EMAIL_PATTERN.match(self.value):
            raise ValueError(f"Invalid user email: {self.value}")

    def __str__(self) -> str:
        return self.value
