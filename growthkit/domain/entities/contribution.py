"""
Contribution Entity - A tool suggested by a member, pending admin review.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4
from growthkit.domain.entities.tool import Tool
from growthkit.domain.exceptions import DomainValidationError
from growthkit.domain.value_objects.contribution_id import ContributionId
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.domain.value_objects.user_id import UserId

COMMUNITY_CATEGORY = "Community"
COMMUNITY_TAGS = ("community", "new")


class ContributionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class Contribution:
    id: ContributionId
    user_id: UserId
    user_email: UserEmail
    tool_name: str
    tool_url: str
    description: str
    status: ContributionStatus
    created_at: datetime

    @classmethod
    def create(
        cls,
        user_id: UserId,
        user_email: UserEmail,
        tool_name: str,
        tool_url: str,
        description: str,
    ) -> Contribution:
        return cls(
            id=ContributionId(str(uuid4())),
            user_id=user_id,
            user_email=user_email,
            tool_name=tool_name,
            tool_url=tool_url,
            description=description,
            status=ContributionStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def is_pending(self) -> bool:
        return self.status is ContributionStatus.PENDING

    def approve(self) -> None:
        self._ensure_pending()
        self.status = ContributionStatus.APPROVED

    def reject(self) -> None:
        self._ensure_pending()
        self.status = ContributionStatus.REJECTED

    def to_tool(self, cost: int, image_url: str) -> Tool:
        """Build the community listing published when this contribution is approved."""
        return Tool.create(
            title=self.tool_name,
            description=self.description,
            category=COMMUNITY_CATEGORY,
            cost=cost,
            tags=list(COMMUNITY_TAGS),
            image_url=image_url,
            content=f"Tool content from URL: {self.tool_url}",
        )

    def _ensure_pending(self) -> None:
        if not self.is_pending:
            raise DomainValidationError("Contribution has already been reviewed.")
