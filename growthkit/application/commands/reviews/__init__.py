"""Review commands."""

from .create_review import CreateReviewCommand, CreateReviewHandler

__all__ = [
    "CreateReviewCommand",
    "CreateReviewHandler",
]
