"""
Approve Contribution Command (admin).

Steps:
1. Check the caller is an admin
2. Load the contribution; it must still be pending
3. Publish a community tool built from it
4. Reward the contributor, if their account still exists
5. Mark the contribution approved
"""

from dataclasses import dataclass
from logging import getLogger
from growthkit.application.common.actors import load_admin
from growthkit.application.common.interfaces import Command, CommandHandler
from growthkit.config.settings import Config
from growthkit.domain.entities.contribution import Contribution
from growthkit.domain.exceptions import EntityNotFoundError
from growthkit.domain.ports.repositories import (
    ContributionRepository,
    ToolRepository,
    UserRepository,
)
from growthkit.domain.value_objects.contribution_id import ContributionId
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.observability.metrics import CreditSource, increment_credits_earned

logger = getLogger(__name__)


@dataclass(frozen=True)
class ApproveContributionCommand(Command[Contribution]):
    admin_email: UserEmail
    contribution_id: ContributionId


class ApproveContributionHandler(CommandHandler[Contribution]):
    def __init__(
        self,
        user_repository: UserRepository,
        tool_repository: ToolRepository,
        contribution_repository: ContributionRepository,
    ):
        self._user_repository = user_repository
        self._tool_repository = tool_repository
        self._contribution_repository = contribution_repository

    async def execute(self, command: ApproveContributionCommand) -> Contribution:
        await load_admin(self._user_repository, command.admin_email)

        contribution = await self._contribution_repository.get_by_id(
            command.contribution_id
        )
        if not contribution:
            raise EntityNotFoundError("Contribution not found.")

        contribution.approve()

        tool = contribution.to_tool(
            cost=Config.COMMUNITY_TOOL_COST,
            image_url=Config.COMMUNITY_TOOL_IMAGE_URL,
        )
        await self._tool_repository.save(tool)

        contributor = await self._user_repository.get_by_email(contribution.user_email)
        if contributor and Config.CREDIT_REWARD_FOR_CONTRIBUTION > 0:
            contributor.add_credits(Config.CREDIT_REWARD_FOR_CONTRIBUTION)
            await self._user_repository.save(contributor)
            increment_credits_earned(
                CreditSource.CONTRIBUTION, Config.CREDIT_REWARD_FOR_CONTRIBUTION
            )
        elif not contributor:
            logger.warning(
                f"[Approve] Contributor {contribution.user_email.value} no longer exists"
            )

        await self._contribution_repository.save(contribution)
        logger.info(
            f"[Approve] contribution={contribution.id.value} published tool={tool.id.value}"
        )
        return contribution
