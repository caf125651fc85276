"""
PersistenceError - Raised by a repository when the underlying store fails.
Maps to: HTTP 503 Service Unavailable

The caller may retry; handlers never retry on their own.
"""


class PersistenceError(Exception):
    """Exception raised when a repository operation could not complete."""

    def __init__(self, message: str = "Persistence operation failed."):
        super().__init__(message)
