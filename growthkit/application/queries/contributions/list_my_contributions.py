"""List My Contributions Query."""

from dataclasses import dataclass
from growthkit.application.common.actors import load_actor
from growthkit.application.common.interfaces import Query, QueryHandler
from growthkit.domain.entities.contribution import Contribution
from growthkit.domain.ports.repositories import ContributionRepository, UserRepository
from growthkit.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class ListMyContributionsQuery(Query[list[Contribution]]):
    user_email: UserEmail


class ListMyContributionsHandler(QueryHandler[list[Contribution]]):
    def __init__(
        self,
        user_repository: UserRepository,
        contribution_repository: ContributionRepository,
    ):
        self._user_repository = user_repository
        self._contribution_repository = contribution_repository

    async def execute(self, query: ListMyContributionsQuery) -> list[Contribution]:
        user = await load_actor(self._user_repository, query.user_email)
        return await self._contribution_repository.list_by_user(user.id)
