"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (memory, Redis, etc.)

Infrastructure layer provides implementations.
"""

from growthkit.domain.ports.repositories.user_repository import UserRepository
from growthkit.domain.ports.repositories.tool_repository import ToolRepository
from growthkit.domain.ports.repositories.contribution_repository import (
    ContributionRepository,
)
from growthkit.domain.ports.repositories.review_repository import ReviewRepository

__all__ = [
    "UserRepository",
    "ToolRepository",
    "ContributionRepository",
    "ReviewRepository",
]
