"""
PhoneNumber Value Object - E.164 style phone number used by the SMS channel.
"""

import re
from dataclasses import dataclass

PHONE_PATTERN = re.compile(r"^\+[1-9]\d{6,14}$")


@dataclass(frozen=True)
class PhoneNumber:
    value: str  # "+46701234567"

    def __post_init__(self):
        if not self.value or not PHONE_PATTERN.match(self.value):
            raise ValueError(f"Invalid phone number: {self.value}")

    def __str__(self) -> str:
        return self.value
