"""Submit Contribution Command."""

from dataclasses import dataclass
from urllib.parse import urlparse
from growthkit.application.common.actors import load_actor
from growthkit.application.common.interfaces import Command, CommandHandler
from growthkit.domain.entities.contribution import Contribution
from growthkit.domain.exceptions import DomainValidationError
from growthkit.domain.ports.repositories import ContributionRepository, UserRepository
from growthkit.domain.value_objects.user_email import UserEmail

MIN_TOOL_NAME_LENGTH = 3
MIN_DESCRIPTION_LENGTH = 20


@dataclass(frozen=True)
class SubmitContributionCommand(Command[Contribution]):
    user_email: UserEmail
    tool_name: str
    tool_url: str
    description: str


class SubmitContributionHandler(CommandHandler[Contribution]):
    def __init__(
        self,
        user_repository: UserRepository,
        contribution_repository: ContributionRepository,
    ):
        self._user_repository = user_repository
        self._contribution_repository = contribution_repository

    async def execute(self, command: SubmitContributionCommand) -> Contribution:
        user = await load_actor(self._user_repository, command.user_email)

        tool_name = command.tool_name.strip()
        description = command.description.strip()
        tool_url = command.tool_url.strip()
        if len(tool_name) < MIN_TOOL_NAME_LENGTH:
            raise DomainValidationError(
                f"Tool name must be at least {MIN_TOOL_NAME_LENGTH} characters."
            )
        if len(description) < MIN_DESCRIPTION_LENGTH:
            raise DomainValidationError(
                f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters."
            )
        parsed = urlparse(tool_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise DomainValidationError("Please enter a valid URL.")

        contribution = Contribution.create(
            user_id=user.id,
            user_email=user.email,
            tool_name=tool_name,
            tool_url=tool_url,
            description=description,
        )
        await self._contribution_repository.save(contribution)
        return contribution
