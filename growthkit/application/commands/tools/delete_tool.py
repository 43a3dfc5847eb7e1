"""Delete Tool Command (admin)."""

from dataclasses import dataclass
from growthkit.application.common.actors import load_admin
from growthkit.application.common.interfaces import Command, CommandHandler
from growthkit.domain.exceptions import EntityNotFoundError
from growthkit.domain.ports.repositories import ToolRepository, UserRepository
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class DeleteToolCommand(Command[ToolId]):
    admin_email: UserEmail
    tool_id: ToolId


class DeleteToolHandler(CommandHandler[ToolId]):
    def __init__(
        self, user_repository: UserRepository, tool_repository: ToolRepository
    ):
        self._user_repository = user_repository
        self._tool_repository = tool_repository

    async def execute(self, command: DeleteToolCommand) -> ToolId:
        await load_admin(self._user_repository, command.admin_email)

        if not await self._tool_repository.delete(command.tool_id):
            raise EntityNotFoundError("Tool not found.")
        return command.tool_id
