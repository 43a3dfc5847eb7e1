"""
User Entity - A marketplace member with a credit balance.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4
from growthkit.domain.entities.tool import Tool
from growthkit.domain.exceptions import DomainValidationError
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.domain.value_objects.user_id import UserId


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    email: UserEmail
    password_hash: str
    created_at: datetime
    # Optional fields (with defaults) - must come last
    credits: int = 0
    unlocked_tools: list[ToolId] = field(default_factory=list)
    is_admin: bool = False

    def __post_init__(self):
        if self.credits < 0:
            raise ValueError(f"Credit balance cannot be negative: {self.credits}")

    @classmethod
    def create(
        cls,
        email: UserEmail,
        password_hash: str,
        starting_credits: int,
        is_admin: bool = False,
    ) -> User:
        """Factory method for a new member with a generated ID and timestamp."""
        return cls(
            id=UserId(str(uuid4())),
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
            credits=starting_credits,
            is_admin=is_admin,
        )

    def has_unlocked(self, tool_id: ToolId) -> bool:
        return tool_id in self.unlocked_tools

    def unlock(self, tool: Tool) -> None:
        """Spend credits on a tool. The balance never goes below zero."""
        if self.has_unlocked(tool.id):
            raise DomainValidationError("Tool already unlocked.")
        if self.credits < tool.cost:
            raise DomainValidationError("Not enough credits.")

        self.credits -= tool.cost
        self.unlocked_tools.append(tool.id)

    def add_credits(self, amount: int) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise DomainValidationError("Invalid number of credits.")
        self.credits += amount
