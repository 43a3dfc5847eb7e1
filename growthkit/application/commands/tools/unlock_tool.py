"""
Unlock Tool Command.

Spends the tool's cost from the caller's balance and records the unlock.
"""

from dataclasses import dataclass
from logging import getLogger
from growthkit.application.common.actors import load_actor
from growthkit.application.common.interfaces import Command, CommandHandler
from growthkit.domain.entities.tool import Tool
from growthkit.domain.entities.user import User
from growthkit.domain.exceptions import EntityNotFoundError
from growthkit.domain.ports.repositories import ToolRepository, UserRepository
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.observability.metrics import increment_credits_spent

logger = getLogger(__name__)


@dataclass(frozen=True)
class UnlockResult:
    user: User
    tool: Tool


@dataclass(frozen=True)
class UnlockToolCommand(Command[UnlockResult]):
    user_email: UserEmail
    tool_id: ToolId


class UnlockToolHandler(CommandHandler[UnlockResult]):
    def __init__(
        self, user_repository: UserRepository, tool_repository: ToolRepository
    ):
        self._user_repository = user_repository
        self._tool_repository = tool_repository

    async def execute(self, command: UnlockToolCommand) -> UnlockResult:
        user = await load_actor(self._user_repository, command.user_email)

        tool = await self._tool_repository.get_by_id(command.tool_id)
        if not tool:
            raise EntityNotFoundError("Tool not found.")

        user.unlock(tool)
        await self._user_repository.save(user)

        increment_credits_spent(tool.cost)
        logger.info(
            f"[Unlock] user={user.id.value} tool={tool.id.value} cost={tool.cost} "
            f"balance={user.credits}"
        )
        return UnlockResult(user=user, tool=tool)
