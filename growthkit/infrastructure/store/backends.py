"""
Key-value backends for the entity store.

A backend holds two things:
- documents: "<key> -> JSON string"
- indexes: "<index> -> keys in insertion order"

Writing a document and adding its key to the index happen together, so a
listed key always has a document behind it.

Redis layout (with prefix "growthkit"):
- "growthkit:doc:<key>"   STRING, JSON document
- "growthkit:idx:<index>" ZSET, member = key, score = first-insert sequence
- "growthkit:seq:<index>" INT, counter handing out those sequence numbers
"""

from abc import ABC, abstractmethod
from typing import Optional
from redis.asyncio import Redis


class KeyValueBackend(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[str]: ...

    @abstractmethod
    async def put(self, index: str, key: str, value: str) -> None: ...

    @abstractmethod
    async def remove(self, index: str, key: str) -> bool: ...

    @abstractmethod
    async def members(self, index: str) -> list[str]: ...

    @abstractmethod
    async def count(self, index: str) -> int: ...

    @abstractmethod
    async def get_many(self, keys: list[str]) -> list[Optional[str]]: ...


class MemoryBackend(KeyValueBackend):
    """Per-process store. Never awaits between read and write, so each call is atomic on the event loop."""

    def __init__(self):
        self._documents: dict[str, str] = {}
        # dict keys double as an insertion-ordered set
        self._indexes: dict[str, dict[str, None]] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._documents.get(key)

    async def get_many(self, keys: list[str]) -> list[Optional[str]]:
        return [self._documents.get(key) for key in keys]

    async def put(self, index: str, key: str, value: str) -> None:
        self._documents[key] = value
        self._indexes.setdefault(index, {})[key] = None

    async def remove(self, index: str, key: str) -> bool:
        existed = self._documents.pop(key, None) is not None
        self._indexes.get(index, {}).pop(key, None)
        return existed

    async def members(self, index: str) -> list[str]:
        return list(self._indexes.get(index, {}))

    async def count(self, index: str) -> int:
        return len(self._indexes.get(index, {}))


class RedisBackend(KeyValueBackend):
    def __init__(self, redis: Redis, prefix: str = "growthkit"):
        self._redis = redis
        self._prefix = prefix

    def _doc_key(self, key: str) -> str:
        return f"{self._prefix}:doc:{key}"

    def _index_key(self, index: str) -> str:
        return f"{self._prefix}:idx:{index}"

    def _sequence_key(self, index: str) -> str:
        return f"{self._prefix}:seq:{index}"

    async def get(self, key: str) -> Optional[str]:
        return await self._redis.get(self._doc_key(key))

    async def get_many(self, keys: list[str]) -> list[Optional[str]]:
        if not keys:
            return []
        return await self._redis.mget([self._doc_key(key) for key in keys])

    async def put(self, index: str, key: str, value: str) -> None:
        # Unique per index, so two inserts never tie on score
        sequence = await self._redis.incr(self._sequence_key(index))
        async with self._redis.pipeline(transaction=True) as pipe:
            pipe.set(self._doc_key(key), value)
            # nx keeps the original sequence on updates
            pipe.zadd(self._index_key(index), {key: sequence}, nx=True)
            await pipe.execute()

    async def remove(self, index: str, key: str) -> bool:
        async with self._redis.pipeline(transaction=True) as pipe:
            pipe.delete(self._doc_key(key))
            pipe.zrem(self._index_key(index), key)
            deleted, _ = await pipe.execute()
        return bool(deleted)

    async def members(self, index: str) -> list[str]:
        return list(await self._redis.zrange(self._index_key(index), 0, -1))

    async def count(self, index: str) -> int:
        return int(await self._redis.zcard(self._index_key(index)))
