"""List Admin Tools Query - the full catalog, without seeding."""

from dataclasses import dataclass
from growthkit.application.common.actors import load_admin
from growthkit.application.common.interfaces import Query, QueryHandler
from growthkit.domain.entities.tool import Tool
from growthkit.domain.ports.repositories import ToolRepository, UserRepository
from growthkit.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class ListAdminToolsQuery(Query[list[Tool]]):
    admin_email: UserEmail


class ListAdminToolsHandler(QueryHandler[list[Tool]]):
    def __init__(
        self, user_repository: UserRepository, tool_repository: ToolRepository
    ):
        self._user_repository = user_repository
        self._tool_repository = tool_repository

    async def execute(self, query: ListAdminToolsQuery) -> list[Tool]:
        await load_admin(self._user_repository, query.admin_email)
        return await self._tool_repository.list_all()
