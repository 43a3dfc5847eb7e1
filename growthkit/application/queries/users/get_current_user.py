"""Get Current User Query."""

from dataclasses import dataclass
from growthkit.application.common.actors import load_actor
from growthkit.application.common.interfaces import Query, QueryHandler
from growthkit.domain.entities.user import User
from growthkit.domain.ports.repositories import UserRepository
from growthkit.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class GetCurrentUserQuery(Query[User]):
    user_email: UserEmail


class GetCurrentUserHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetCurrentUserQuery) -> User:
        return await load_actor(self._user_repository, query.user_email)
