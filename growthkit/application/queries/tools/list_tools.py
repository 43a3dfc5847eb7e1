"""
List Tools Query.

An empty catalog is seeded on first read from the JSON file at
Config.SEED_TOOLS_FILE.
"""

import json
from dataclasses import dataclass
from logging import getLogger
from growthkit.application.common.interfaces import Query, QueryHandler
from growthkit.config.settings import Config
from growthkit.domain.entities.tool import Tool
from growthkit.domain.ports.repositories import ToolRepository
from growthkit.domain.value_objects.tool_id import ToolId

logger = getLogger(__name__)


@dataclass(frozen=True)
class ListToolsQuery(Query[list[Tool]]):
    pass


def load_seed_tools(path: str) -> list[Tool]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
    except FileNotFoundError:
        logger.warning(f"[Catalog] Seed file not found: {path}")
        return []

    return [
        Tool(
            id=ToolId(record["id"]),
            title=record["title"],
            description=record["description"],
            category=record["category"],
            cost=int(record["cost"]),
            tags=list(record.get("tags", [])),
            image_url=record.get("image_url", ""),
            content=record.get("content", ""),
            rating=float(record.get("rating", 0.0)),
            review_count=int(record.get("review_count", 0)),
        )
        for record in records
    ]


class ListToolsHandler(QueryHandler[list[Tool]]):
    def __init__(self, tool_repository: ToolRepository, seed_file: str | None = None):
        self._tool_repository = tool_repository
        self._seed_file = seed_file or Config.SEED_TOOLS_FILE

    async def execute(self, query: ListToolsQuery) -> list[Tool]:
        if await self._tool_repository.count() == 0:
            tools = load_seed_tools(self._seed_file)
            for tool in tools:
                await self._tool_repository.save(tool)
            logger.info(f"[Catalog] Seeded {len(tools)} tools")

        return await self._tool_repository.list_all()
