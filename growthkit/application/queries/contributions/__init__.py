"""Contribution queries."""

from growthkit.application.queries.contributions.list_my_contributions import (
    ListMyContributionsQuery,
    ListMyContributionsHandler,
)
from growthkit.application.queries.contributions.list_all_contributions import (
    ListAllContributionsQuery,
    ListAllContributionsHandler,
)

__all__ = [
    "ListMyContributionsQuery",
    "ListMyContributionsHandler",
    "ListAllContributionsQuery",
    "ListAllContributionsHandler",
]
