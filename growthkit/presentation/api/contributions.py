"""Contributions API Router - members suggest tools for the catalog."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from growthkit.application.commands.contributions import (
    SubmitContributionCommand,
    SubmitContributionHandler,
)
from growthkit.application.dto import ContributionDTO
from growthkit.application.queries.contributions import (
    ListMyContributionsHandler,
    ListMyContributionsQuery,
)
from growthkit.presentation.dependencies.auth import AuthUser, get_current_user


class SubmitContributionRequest(BaseModel):
    tool_name: str = ""
    tool_url: str = ""
    description: str = ""


router = APIRouter(prefix="/api/contributions", tags=["contributions"])


@router.post(
    "",
    response_model=ContributionDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def submit_contribution(
    body: SubmitContributionRequest,
    handler: FromDishka[SubmitContributionHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    contribution = await handler.execute(
        SubmitContributionCommand(
            user_email=current_user.email,
            tool_name=body.tool_name,
            tool_url=body.tool_url,
            description=body.description,
        )
    )
    return ContributionDTO.from_entity(contribution)


@router.get("/me", response_model=list[ContributionDTO])
@inject
async def my_contributions(
    handler: FromDishka[ListMyContributionsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    contributions = await handler.execute(
        ListMyContributionsQuery(user_email=current_user.email)
    )
    return [ContributionDTO.from_entity(c) for c in contributions]
