"""Reject Contribution Command (admin)."""

from dataclasses import dataclass
from growthkit.application.common.actors import load_admin
from growthkit.application.common.interfaces import Command, CommandHandler
from growthkit.domain.entities.contribution import Contribution
from growthkit.domain.exceptions import EntityNotFoundError
from growthkit.domain.ports.repositories import ContributionRepository, UserRepository
from growthkit.domain.value_objects.contribution_id import ContributionId
from growthkit.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class RejectContributionCommand(Command[Contribution]):
    admin_email: UserEmail
    contribution_id: ContributionId


class RejectContributionHandler(CommandHandler[Contribution]):
    def __init__(
        self,
        user_repository: UserRepository,
        contribution_repository: ContributionRepository,
    ):
        self._user_repository = user_repository
        self._contribution_repository = contribution_repository

    async def execute(self, command: RejectContributionCommand) -> Contribution:
        await load_admin(self._user_repository, command.admin_email)

        contribution = await self._contribution_repository.get_by_id(
            command.contribution_id
        )
        if not contribution:
            raise EntityNotFoundError("Contribution not found.")

        contribution.reject()
        await self._contribution_repository.save(contribution)
        return contribution
