"""Review commands."""

from .create_review import (
    THANK_YOU_SUBJECT,
    CreateReviewCommand,
    CreateReviewHandler,
    VALIDATOR as CREATE_REVIEW_VALIDATOR,
)

__all__ = [
    "THANK_YOU_SUBJECT",
    "CreateReviewCommand",
    "CreateReviewHandler",
    "CREATE_REVIEW_VALIDATOR",
]
