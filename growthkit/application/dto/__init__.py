"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- user.py → UserDTO, AuthResultDTO
- tool.py → ToolDTO, UnlockResultDTO
- contribution.py → ContributionDTO
- review.py → ReviewDTO
- calculators.py → ABTestResultDTO, SubjectLineResultDTO, HeadlinesDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from growthkit.application.dto.user import UserDTO, AuthResultDTO
from growthkit.application.dto.tool import ToolDTO, UnlockResultDTO
from growthkit.application.dto.contribution import ContributionDTO
from growthkit.application.dto.review import ReviewDTO
from growthkit.application.dto.calculators import (
    ABTestResultDTO,
    SubjectLineFeedbackDTO,
    SubjectLineResultDTO,
    HeadlinesDTO,
)

__all__ = [
    "UserDTO",
    "AuthResultDTO",
    "ToolDTO",
    "UnlockResultDTO",
    "ContributionDTO",
    "ReviewDTO",
    "ABTestResultDTO",
    "SubjectLineFeedbackDTO",
    "SubjectLineResultDTO",
    "HeadlinesDTO",
]
