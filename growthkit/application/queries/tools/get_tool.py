"""Get Tool Query."""

from dataclasses import dataclass
from growthkit.application.common.interfaces import Query, QueryHandler
from growthkit.domain.entities.tool import Tool
from growthkit.domain.exceptions import EntityNotFoundError
from growthkit.domain.ports.repositories import ToolRepository
from growthkit.domain.value_objects.tool_id import ToolId


@dataclass(frozen=True)
class GetToolQuery(Query[Tool]):
    tool_id: ToolId


class GetToolHandler(QueryHandler[Tool]):
    def __init__(self, tool_repository: ToolRepository):
        self._tool_repository = tool_repository

    async def execute(self, query: GetToolQuery) -> Tool:
        tool = await self._tool_repository.get_by_id(query.tool_id)
        if not tool:
            raise EntityNotFoundError("Tool not found.")
        return tool
