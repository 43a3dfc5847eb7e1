"""Review queries."""

from growthkit.application.queries.reviews.list_tool_reviews import (
    ListToolReviewsQuery,
    ListToolReviewsHandler,
)

__all__ = [
    "ListToolReviewsQuery",
    "ListToolReviewsHandler",
]
