"""Domain entities."""

from growthkit.domain.entities.user import User
from growthkit.domain.entities.tool import Tool
from growthkit.domain.entities.contribution import Contribution, ContributionStatus
from growthkit.domain.entities.review import Review

__all__ = [
    "User",
    "Tool",
    "Contribution",
    "ContributionStatus",
    "Review",
]
