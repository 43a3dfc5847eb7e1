"""Key-Value Tool Repository Implementation."""

from typing import Any, Optional
from growthkit.domain.entities.tool import Tool
from growthkit.domain.ports.repositories import ToolRepository
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.infrastructure.store.backends import KeyValueBackend
from growthkit.infrastructure.store.entity_store import IndexedEntityStore


class KVToolRepository(ToolRepository):
    _store: IndexedEntityStore

    def __init__(self, backend: KeyValueBackend):
        self._store = IndexedEntityStore(backend, entity_name="tool", index_name="tools")

    def _to_record(self, tool: Tool) -> dict[str, Any]:
        return {
            "id": tool.id.value,
            "title": tool.title,
            "description": tool.description,
            "category": tool.category,
            "cost": tool.cost,
            "tags": list(tool.tags),
            "image_url": tool.image_url,
            "content": tool.content,
            "rating": tool.rating,
            "review_count": tool.review_count,
        }

    def _to_entity(self, record: dict[str, Any]) -> Tool:
        return Tool(
            id=ToolId(record["id"]),
            title=record["title"],
            description=record["description"],
            category=record["category"],
            cost=record["cost"],
            tags=list(record.get("tags", [])),
            image_url=record.get("image_url", ""),
            content=record.get("content", ""),
            rating=record.get("rating", 0.0),
            review_count=record.get("review_count", 0),
        )

    async def get_by_id(self, tool_id: ToolId) -> Optional[Tool]:
        record = await self._store.get(tool_id.value)
        return self._to_entity(record) if record else None

    async def list_all(self) -> list[Tool]:
        return [self._to_entity(record) for record in await self._store.list_all()]

    async def count(self) -> int:
        return await self._store.count()

    async def save(self, tool: Tool) -> None:
        await self._store.put(tool.id.value, self._to_record(tool))

    async def delete(self, tool_id: ToolId) -> bool:
        return await self._store.delete(tool_id.value)
