"""Credits API Router. Payment is mocked: a purchase always succeeds."""

from fastapi import APIRouter, Depends
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, StrictInt
from growthkit.application.commands.credits import (
    BuyCreditsCommand,
    BuyCreditsHandler,
)
from growthkit.application.dto import UserDTO
from growthkit.presentation.dependencies.auth import AuthUser, get_current_user


class BuyCreditsRequest(BaseModel):
    credits: StrictInt = 0


router = APIRouter(prefix="/api/credits", tags=["credits"])


@router.post("/buy", response_model=UserDTO)
@inject
async def buy_credits(
    body: BuyCreditsRequest,
    handler: FromDishka[BuyCreditsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(
        BuyCreditsCommand(user_email=current_user.email, credits=body.credits)
    )
    return UserDTO.from_entity(user)
