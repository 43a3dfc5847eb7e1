"""Key-value entity store."""

from growthkit.infrastructure.store.backends import (
    KeyValueBackend,
    MemoryBackend,
    RedisBackend,
)
from growthkit.infrastructure.store.entity_store import IndexedEntityStore
from growthkit.infrastructure.store.redis_client import (
    create_redis_client,
    close_redis_client,
)

__all__ = [
    "KeyValueBackend",
    "MemoryBackend",
    "RedisBackend",
    "IndexedEntityStore",
    "create_redis_client",
    "close_redis_client",
]
