"""List Tool Reviews Query - newest first."""

from dataclasses import dataclass
from growthkit.application.common.interfaces import Query, QueryHandler
from growthkit.domain.entities.review import Review
from growthkit.domain.ports.repositories import ReviewRepository
from growthkit.domain.value_objects.tool_id import ToolId


@dataclass(frozen=True)
class ListToolReviewsQuery(Query[list[Review]]):
    tool_id: ToolId


class ListToolReviewsHandler(QueryHandler[list[Review]]):
    def __init__(self, review_repository: ReviewRepository):
        self._review_repository = review_repository

    async def execute(self, query: ListToolReviewsQuery) -> list[Review]:
        reviews = await self._review_repository.list_by_tool(query.tool_id)
        return sorted(reviews, key=lambda review: review.created_at, reverse=True)
