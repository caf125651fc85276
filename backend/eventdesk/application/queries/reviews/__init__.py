"""Review-related queries."""

from eventdesk.application.queries.reviews.list_reviews import (
    ListReviewsQuery,
    ListReviewsHandler,
    VALIDATOR as LIST_REVIEWS_VALIDATOR,
)

__all__ = [
    "ListReviewsQuery",
    "ListReviewsHandler",
    "LIST_REVIEWS_VALIDATOR",
]
