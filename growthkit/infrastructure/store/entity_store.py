"""
IndexedEntityStore - JSON documents of one entity type plus an index of their keys.

Example:
    store = IndexedEntityStore(backend, entity_name="tool", index_name="tools")
    await store.put("1", {"id": "1", "title": "..."})
    await store.list_all()   # -> [{"id": "1", ...}]
"""

import json
import logging
from typing import Any, Optional
from growthkit.infrastructure.store.backends import KeyValueBackend

logger = logging.getLogger(__name__)


class IndexedEntityStore:
    def __init__(self, backend: KeyValueBackend, entity_name: str, index_name: str):
        self._backend = backend
        self._entity_name = entity_name
        self._index_name = index_name

    def _key(self, key: str) -> str:
        return f"{self._entity_name}:{key}"

    async def get(self, key: str) -> Optional[dict[str, Any]]:
        raw = await self._backend.get(self._key(key))
        return json.loads(raw) if raw is not None else None

    async def exists(self, key: str) -> bool:
        return await self._backend.get(self._key(key)) is not None

    async def put(self, key: str, document: dict[str, Any]) -> None:
        await self._backend.put(self._index_name, self._key(key), json.dumps(document))

    async def delete(self, key: str) -> bool:
        return await self._backend.remove(self._index_name, self._key(key))

    async def count(self) -> int:
        return await self._backend.count(self._index_name)

    async def list_all(self) -> list[dict[str, Any]]:
        """All documents in insertion order."""
        keys = await self._backend.members(self._index_name)
        raws = await self._backend.get_many(keys)
        documents = []
        for key, raw in zip(keys, raws):
            if raw is None:
                logger.warning(f"[Store] Index {self._index_name} lists missing key {key}")
                continue
            documents.append(json.loads(raw))
        return documents
