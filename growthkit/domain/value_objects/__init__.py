"""Value objects - immutable identifiers and validated scalars."""

from growthkit.domain.value_objects.user_id import UserId
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.domain.value_objects.contribution_id import ContributionId
from growthkit.domain.value_objects.review_id import ReviewId

__all__ = [
    "UserId",
    "UserEmail",
    "ToolId",
    "ContributionId",
    "ReviewId",
]
