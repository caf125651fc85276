"""
AccessDeniedError - Raised when the requester is not allowed to change an
event (only its organizer may cancel it).
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    def __init__(self, message: str = "Only the organizer may do this"):
        super().__init__(message)
