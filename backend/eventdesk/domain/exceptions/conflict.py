"""
ConflictError - Raised when a state-dependent rule is violated
(duplicate review, cancelling an already cancelled event, ...).
Maps to: HTTP 409 Conflict
"""


class ConflictError(Exception):
    def __init__(self, message: str = "The operation conflicts with current state."):
        super().__init__(message)
