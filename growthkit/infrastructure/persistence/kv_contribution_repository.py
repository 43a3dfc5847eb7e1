"""Key-Value Contribution Repository Implementation."""

from datetime import datetime
from typing import Any, Optional
from growthkit.domain.entities.contribution import Contribution, ContributionStatus
from growthkit.domain.ports.repositories import ContributionRepository
from growthkit.domain.value_objects.contribution_id import ContributionId
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.domain.value_objects.user_id import UserId
from growthkit.infrastructure.store.backends import KeyValueBackend
from growthkit.infrastructure.store.entity_store import IndexedEntityStore


class KVContributionRepository(ContributionRepository):
    _store: IndexedEntityStore

    def __init__(self, backend: KeyValueBackend):
        self._store = IndexedEntityStore(
            backend, entity_name="contribution", index_name="contributions"
        )

    def _to_record(self, contribution: Contribution) -> dict[str, Any]:
        return {
            "id": contribution.id.value,
            "user_id": contribution.user_id.value,
            "user_email": contribution.user_email.value,
            "tool_name": contribution.tool_name,
            "tool_url": contribution.tool_url,
            "description": contribution.description,
            "status": contribution.status.value,
            "created_at": contribution.created_at.isoformat(),
        }

    def _to_entity(self, record: dict[str, Any]) -> Contribution:
        return Contribution(
            id=ContributionId(record["id"]),
            user_id=UserId(record["user_id"]),
            user_email=UserEmail(record["user_email"]),
            tool_name=record["tool_name"],
            tool_url=record["tool_url"],
            description=record["description"],
            status=ContributionStatus(record["status"]),
            created_at=datetime.fromisoformat(record["created_at"]),
        )

    async def get_by_id(
        self, contribution_id: ContributionId
    ) -> Optional[Contribution]:
        record = await self._store.get(contribution_id.value)
        return self._to_entity(record) if record else None

    async def list_all(self) -> list[Contribution]:
        return [self._to_entity(record) for record in await self._store.list_all()]

    async def list_by_user(self, user_id: UserId) -> list[Contribution]:
        return [c for c in await self.list_all() if c.user_id == user_id]

    async def save(self, contribution: Contribution) -> None:
        await self._store.put(contribution.id.value, self._to_record(contribution))
