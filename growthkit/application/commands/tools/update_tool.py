"""Update Tool Command (admin)."""

from dataclasses import dataclass, field
from typing import Any
from growthkit.application.common.actors import load_admin
from growthkit.application.common.interfaces import Command, CommandHandler
from growthkit.domain.entities.tool import Tool
from growthkit.domain.exceptions import EntityNotFoundError
from growthkit.domain.ports.repositories import ToolRepository, UserRepository
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class UpdateToolCommand(Command[Tool]):
    admin_email: UserEmail
    tool_id: ToolId
    changes: dict[str, Any] = field(default_factory=dict)


class UpdateToolHandler(CommandHandler[Tool]):
    def __init__(
        self, user_repository: UserRepository, tool_repository: ToolRepository
    ):
        self._user_repository = user_repository
        self._tool_repository = tool_repository

    async def execute(self, command: UpdateToolCommand) -> Tool:
        await load_admin(self._user_repository, command.admin_email)

        tool = await self._tool_repository.get_by_id(command.tool_id)
        if not tool:
            raise EntityNotFoundError("Tool not found.")

        tool.apply_patch(command.changes)
        await self._tool_repository.save(tool)
        return tool
