"""
Tools API Router - catalog, unlocking and reviews.

GET /api/tools seeds the catalog on first read.
"""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, StrictInt
from growthkit.application.commands.reviews import (
    CreateReviewCommand,
    CreateReviewHandler,
)
from growthkit.application.commands.tools import (
    UnlockToolCommand,
    UnlockToolHandler,
)
from growthkit.application.dto import ReviewDTO, ToolDTO, UnlockResultDTO, UserDTO
from growthkit.application.queries.reviews import (
    ListToolReviewsHandler,
    ListToolReviewsQuery,
)
from growthkit.application.queries.tools import (
    GetToolHandler,
    GetToolQuery,
    ListToolsHandler,
    ListToolsQuery,
)
from growthkit.presentation.dependencies.auth import AuthUser, get_current_user
from growthkit.presentation.dependencies.path_ids import parse_tool_id


# ==================== REQUEST MODELS ====================
class CreateReviewRequest(BaseModel):
    rating: StrictInt = 0
    comment: str = ""


# ==================== ROUTER ====================
router = APIRouter(prefix="/api/tools", tags=["tools"])


# ==================== ENDPOINTS ====================
@router.get("", response_model=list[ToolDTO])
@inject
async def list_tools(handler: FromDishka[ListToolsHandler]):
    tools = await handler.execute(ListToolsQuery())
    return [ToolDTO.from_entity(tool) for tool in tools]


@router.get("/{tool_id}", response_model=ToolDTO)
@inject
async def get_tool(tool_id: str, handler: FromDishka[GetToolHandler]):
    tool = await handler.execute(GetToolQuery(tool_id=parse_tool_id(tool_id)))
    return ToolDTO.from_entity(tool)


@router.post("/{tool_id}/unlock", response_model=UnlockResultDTO)
@inject
async def unlock_tool(
    tool_id: str,
    handler: FromDishka[UnlockToolHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(
        UnlockToolCommand(user_email=current_user.email, tool_id=parse_tool_id(tool_id))
    )
    return UnlockResultDTO(
        user=UserDTO.from_entity(result.user),
        tool=ToolDTO.from_entity(result.tool),
    )


@router.get("/{tool_id}/reviews", response_model=list[ReviewDTO])
@inject
async def list_reviews(tool_id: str, handler: FromDishka[ListToolReviewsHandler]):
    reviews = await handler.execute(ListToolReviewsQuery(tool_id=parse_tool_id(tool_id)))
    return [ReviewDTO.from_entity(review) for review in reviews]


@router.post(
    "/{tool_id}/reviews",
    response_model=ReviewDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_review(
    tool_id: str,
    body: CreateReviewRequest,
    handler: FromDishka[CreateReviewHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    review = await handler.execute(
        CreateReviewCommand(
            user_email=current_user.email,
            tool_id=parse_tool_id(tool_id),
            rating=body.rating,
            comment=body.comment,
        )
    )
    return ReviewDTO.from_entity(review)
