"""
Key-Value User Repository Implementation.

Users are keyed by email so login and token lookups are a single read.
"""

from datetime import datetime
from typing import Any, Optional
from growthkit.domain.entities.user import User
from growthkit.domain.ports.repositories import UserRepository
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.domain.value_objects.user_id import UserId
from growthkit.infrastructure.store.backends import KeyValueBackend
from growthkit.infrastructure.store.entity_store import IndexedEntityStore


class KVUserRepository(UserRepository):
    _store: IndexedEntityStore

    def __init__(self, backend: KeyValueBackend):
        self._store = IndexedEntityStore(backend, entity_name="user", index_name="users")

    def _to_record(self, user: User) -> dict[str, Any]:
        return {
            "id": user.id.value,
            "email": user.email.value,
            "password_hash": user.password_hash,
            "created_at": user.created_at.isoformat(),
            "credits": user.credits,
            "unlocked_tools": [tool_id.value for tool_id in user.unlocked_tools],
            "is_admin": user.is_admin,
        }

    def _to_entity(self, record: dict[str, Any]) -> User:
        return User(
            id=UserId(record["id"]),
            email=UserEmail(record["email"]),
            password_hash=record["password_hash"],
            created_at=datetime.fromisoformat(record["created_at"]),
            credits=record.get("credits", 0),
            unlocked_tools=[ToolId(v) for v in record.get("unlocked_tools", [])],
            is_admin=record.get("is_admin", False),
        )

    async def get_by_email(self, email: UserEmail) -> Optional[User]:
        record = await self._store.get(email.value)
        return self._to_entity(record) if record else None

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        # Keyed by email, so an id lookup scans
        for user in await self.list_all():
            if user.id == user_id:
                return user
        return None

    async def exists(self, email: UserEmail) -> bool:
        return await self._store.exists(email.value)

    async def list_all(self) -> list[User]:
        return [self._to_entity(record) for record in await self._store.list_all()]

    async def save(self, user: User) -> None:
        await self._store.put(user.email.value, self._to_record(user))
