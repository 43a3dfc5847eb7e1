"""
Review Entity - A member's rating of a tool they have unlocked.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4
from growthkit.domain.value_objects.review_id import ReviewId
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.domain.value_objects.user_id import UserId

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class Review:
    id: ReviewId
    user_id: UserId
    user_email: UserEmail
    tool_id: ToolId
    rating: int
    comment: str
    created_at: datetime

    def __post_init__(self):
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(f"Invalid rating: {self.rating}")

    @classmethod
    def create(
        cls,
        user_id: UserId,
        user_email: UserEmail,
        tool_id: ToolId,
        rating: int,
        comment: str,
    ) -> Review:
        return cls(
            id=ReviewId(str(uuid4())),
            user_id=user_id,
            user_email=user_email,
            tool_id=tool_id,
            rating=rating,
            comment=comment,
            created_at=datetime.now(timezone.utc),
        )
