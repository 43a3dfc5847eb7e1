"""Tool DTOs for API responses."""

from __future__ import annotations
from pydantic import BaseModel
from growthkit.application.dto.user import UserDTO
from growthkit.domain.entities.tool import Tool


class ToolDTO(BaseModel):
    id: str
    title: str
    description: str
    category: str
    cost: int
    tags: list[str]
    image_url: str
    content: str
    rating: float
    review_count: int

    @classmethod
    def from_entity(cls, tool: Tool) -> ToolDTO:
        return cls(
            id=tool.id.value,
            title=tool.title,
            description=tool.description,
            category=tool.category,
            cost=tool.cost,
            tags=list(tool.tags),
            image_url=tool.image_url,
            content=tool.content,
            rating=tool.rating,
            review_count=tool.review_count,
        )


class UnlockResultDTO(BaseModel):
    user: UserDTO
    tool: ToolDTO
