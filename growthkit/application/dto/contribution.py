"""Contribution DTOs for API responses."""

from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel
from growthkit.domain.entities.contribution import Contribution


class ContributionDTO(BaseModel):
    id: str
    user_id: str
    user_email: str
    tool_name: str
    tool_url: str
    description: str
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, contribution: Contribution) -> ContributionDTO:
        return cls(
            id=contribution.id.value,
            user_id=contribution.user_id.value,
            user_email=contribution.user_email.value,
            tool_name=contribution.tool_name,
            tool_url=contribution.tool_url,
            description=contribution.description,
            status=contribution.status.value,
            created_at=contribution.created_at,
        )
