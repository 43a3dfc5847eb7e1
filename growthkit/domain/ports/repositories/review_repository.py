"""
Review Repository Port - Interface for review persistence.
Implementation: growthkit/infrastructure/persistence/kv_review_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from growthkit.domain.entities.review import Review
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.domain.value_objects.user_id import UserId


class ReviewRepository(ABC):
    @abstractmethod
    async def list_by_tool(self, tool_id: ToolId) -> list[Review]: ...

    @abstractmethod
    async def get_by_user_and_tool(
        self, user_id: UserId, tool_id: ToolId
    ) -> Optional[Review]: ...

    @abstractmethod
    async def save(self, review: Review) -> None: ...
