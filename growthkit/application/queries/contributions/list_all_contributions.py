"""List All Contributions Query (admin moderation queue)."""

from dataclasses import dataclass
from growthkit.application.common.actors import load_admin
from growthkit.application.common.interfaces import Query, QueryHandler
from growthkit.domain.entities.contribution import Contribution
from growthkit.domain.ports.repositories import ContributionRepository, UserRepository
from growthkit.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class ListAllContributionsQuery(Query[list[Contribution]]):
    admin_email: UserEmail


class ListAllContributionsHandler(QueryHandler[list[Contribution]]):
    def __init__(
        self,
        user_repository: UserRepository,
        contribution_repository: ContributionRepository,
    ):
        self._user_repository = user_repository
        self._contribution_repository = contribution_repository

    async def execute(self, query: ListAllContributionsQuery) -> list[Contribution]:
        await load_admin(self._user_repository, query.admin_email)
        return await self._contribution_repository.list_all()
