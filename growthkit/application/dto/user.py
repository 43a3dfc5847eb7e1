"""User DTOs for API responses. The password hash never leaves the domain."""

from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel
from growthkit.domain.entities.user import User


class UserDTO(BaseModel):
    id: str
    email: str
    credits: int
    unlocked_tools: list[str]
    created_at: datetime
    is_admin: bool = False

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id.value,
            email=user.email.value,
            credits=user.credits,
            unlocked_tools=[tool_id.value for tool_id in user.unlocked_tools],
            created_at=user.created_at,
            is_admin=user.is_admin,
        )


class AuthResultDTO(BaseModel):
    user: UserDTO
    token: str
