"""Review DTOs for API responses."""

from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel
from growthkit.domain.entities.review import Review


class ReviewDTO(BaseModel):
    id: str
    user_id: str
    user_email: str
    tool_id: str
    rating: int
    comment: str
    created_at: datetime

    @classmethod
    def from_entity(cls, review: Review) -> ReviewDTO:
        return cls(
            id=review.id.value,
            user_id=review.user_id.value,
            user_email=review.user_email.value,
            tool_id=review.tool_id.value,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
        )
