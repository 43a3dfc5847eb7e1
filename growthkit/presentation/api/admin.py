"""
Admin API Router - contribution review and catalog management.

Every endpoint resolves the caller and answers 403 unless they are the admin.
"""

from typing import Any
from fastapi import APIRouter, Body, Depends
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from growthkit.application.commands.contributions import (
    ApproveContributionCommand,
    ApproveContributionHandler,
    RejectContributionCommand,
    RejectContributionHandler,
)
from growthkit.application.commands.tools import (
    DeleteToolCommand,
    DeleteToolHandler,
    UpdateToolCommand,
    UpdateToolHandler,
)
from growthkit.application.dto import ContributionDTO, ToolDTO
from growthkit.application.queries.contributions import (
    ListAllContributionsHandler,
    ListAllContributionsQuery,
)
from growthkit.application.queries.tools import (
    ListAdminToolsHandler,
    ListAdminToolsQuery,
)
from growthkit.presentation.dependencies.auth import AuthUser, get_current_user
from growthkit.presentation.dependencies.path_ids import (
    parse_contribution_id,
    parse_tool_id,
)


class DeleteToolResponse(BaseModel):
    id: str
    deleted: bool


router = APIRouter(prefix="/api/admin", tags=["admin"])


# ==================== CONTRIBUTIONS ====================
@router.get("/contributions", response_model=list[ContributionDTO])
@inject
async def list_contributions(
    handler: FromDishka[ListAllContributionsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    contributions = await handler.execute(
        ListAllContributionsQuery(admin_email=current_user.email)
    )
    return [ContributionDTO.from_entity(c) for c in contributions]


@router.post("/contributions/{contribution_id}/approve", response_model=ContributionDTO)
@inject
async def approve_contribution(
    contribution_id: str,
    handler: FromDishka[ApproveContributionHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    contribution = await handler.execute(
        ApproveContributionCommand(
            admin_email=current_user.email,
            contribution_id=parse_contribution_id(contribution_id),
        )
    )
    return ContributionDTO.from_entity(contribution)


@router.post("/contributions/{contribution_id}/reject", response_model=ContributionDTO)
@inject
async def reject_contribution(
    contribution_id: str,
    handler: FromDishka[RejectContributionHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    contribution = await handler.execute(
        RejectContributionCommand(
            admin_email=current_user.email,
            contribution_id=parse_contribution_id(contribution_id),
        )
    )
    return ContributionDTO.from_entity(contribution)


# ==================== TOOLS ====================
@router.get("/tools", response_model=list[ToolDTO])
@inject
async def list_tools(
    handler: FromDishka[ListAdminToolsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    tools = await handler.execute(ListAdminToolsQuery(admin_email=current_user.email))
    return [ToolDTO.from_entity(tool) for tool in tools]


@router.put("/tools/{tool_id}", response_model=ToolDTO)
@inject
async def update_tool(
    tool_id: str,
    handler: FromDishka[UpdateToolHandler],
    changes: dict[str, Any] = Body(...),
    current_user: AuthUser = Depends(get_current_user),
):
    """Partial update. Only editable fields are accepted; ids and ratings are not."""
    tool = await handler.execute(
        UpdateToolCommand(
            admin_email=current_user.email,
            tool_id=parse_tool_id(tool_id),
            changes=changes,
        )
    )
    return ToolDTO.from_entity(tool)


@router.delete("/tools/{tool_id}", response_model=DeleteToolResponse)
@inject
async def delete_tool(
    tool_id: str,
    handler: FromDishka[DeleteToolHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    deleted_id = await handler.execute(
        DeleteToolCommand(admin_email=current_user.email, tool_id=parse_tool_id(tool_id))
    )
    return DeleteToolResponse(id=deleted_id.value, deleted=True)
