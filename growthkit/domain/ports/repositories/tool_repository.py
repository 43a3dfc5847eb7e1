"""
Tool Repository Port - Interface for tool catalog persistence.
Implementation: growthkit/infrastructure/persistence/kv_tool_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from growthkit.domain.entities.tool import Tool
from growthkit.domain.value_objects.tool_id import ToolId


class ToolRepository(ABC):
    @abstractmethod
    async def get_by_id(self, tool_id: ToolId) -> Optional[Tool]: ...

    @abstractmethod
    async def list_all(self) -> list[Tool]: ...

    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def save(self, tool: Tool) -> None: ...

    @abstractmethod
    async def delete(self, tool_id: ToolId) -> bool: ...
