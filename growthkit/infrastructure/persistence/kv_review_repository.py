"""Key-Value Review Repository Implementation."""

from datetime import datetime
from typing import Any, Optional
from growthkit.domain.entities.review import Review
from growthkit.domain.ports.repositories import ReviewRepository
from growthkit.domain.value_objects.review_id import ReviewId
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.domain.value_objects.user_id import UserId
from growthkit.infrastructure.store.backends import KeyValueBackend
from growthkit.infrastructure.store.entity_store import IndexedEntityStore


class KVReviewRepository(ReviewRepository):
    _store: IndexedEntityStore

    def __init__(self, backend: KeyValueBackend):
        self._store = IndexedEntityStore(
            backend, entity_name="review", index_name="reviews"
        )

    def _to_record(self, review: Review) -> dict[str, Any]:
        return {
            "id": review.id.value,
            "user_id": review.user_id.value,
            "user_email": review.user_email.value,
            "tool_id": review.tool_id.value,
            "rating": review.rating,
            "comment": review.comment,
            "created_at": review.created_at.isoformat(),
        }

    def _to_entity(self, record: dict[str, Any]) -> Review:
        return Review(
            id=ReviewId(record["id"]),
            user_id=UserId(record["user_id"]),
            user_email=UserEmail(record["user_email"]),
            tool_id=ToolId(record["tool_id"]),
            rating=record["rating"],
            comment=record["comment"],
            created_at=datetime.fromisoformat(record["created_at"]),
        )

    async def _list_all(self) -> list[Review]:
        return [self._to_entity(record) for record in await self._store.list_all()]

    async def list_by_tool(self, tool_id: ToolId) -> list[Review]:
        return [r for r in await self._list_all() if r.tool_id == tool_id]

    async def get_by_user_and_tool(
        self, user_id: UserId, tool_id: ToolId
    ) -> Optional[Review]:
        for review in await self.list_by_tool(tool_id):
            if review.user_id == user_id:
                return review
        return None

    async def save(self, review: Review) -> None:
        await self._store.put(review.id.value, self._to_record(review))
