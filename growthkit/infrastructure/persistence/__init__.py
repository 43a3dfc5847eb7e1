"""
Persistence Layer - Repository implementations.

Each repository maps its domain entity to a JSON document in an
IndexedEntityStore and back.
"""

from growthkit.infrastructure.persistence.kv_user_repository import KVUserRepository
from growthkit.infrastructure.persistence.kv_tool_repository import KVToolRepository
from growthkit.infrastructure.persistence.kv_contribution_repository import (
    KVContributionRepository,
)
from growthkit.infrastructure.persistence.kv_review_repository import (
    KVReviewRepository,
)

__all__ = [
    "KVUserRepository",
    "KVToolRepository",
    "KVContributionRepository",
    "KVReviewRepository",
]
