"""
Auth API Router - signup, login and the current user.

Flow:
  POST /api/auth/signup → SignupCommand → SignupHandler → {user, token}
  POST /api/auth/login  → LoginCommand  → LoginHandler  → {user, token}
  GET  /api/auth/me     → GetCurrentUserQuery           → user
"""

from fastapi import APIRouter, Depends, Request, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from growthkit.application.commands.auth import (
    LoginCommand,
    LoginHandler,
    SignupCommand,
    SignupHandler,
)
from growthkit.application.dto import AuthResultDTO, UserDTO
from growthkit.application.queries.users import (
    GetCurrentUserHandler,
    GetCurrentUserQuery,
)
from growthkit.config.settings import Config
from growthkit.presentation.dependencies.auth import AuthUser, get_current_user
from growthkit.presentation.rate_limit import limiter


# ==================== REQUEST MODELS ====================
class CredentialsRequest(BaseModel):
    email: str = ""
    password: str = ""


# ==================== ROUTER ====================
router = APIRouter(prefix="/api/auth", tags=["auth"])


# ==================== ENDPOINTS ====================
@router.post(
    "/signup",
    response_model=AuthResultDTO,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(Config.AUTH_RATE_LIMIT)
@inject
async def signup(
    request: Request,
    body: CredentialsRequest,
    handler: FromDishka[SignupHandler],
):
    result = await handler.execute(
        SignupCommand(email=body.email, password=body.password)
    )
    return AuthResultDTO(user=UserDTO.from_entity(result.user), token=result.token)


@router.post("/login", response_model=AuthResultDTO)
@limiter.limit(Config.AUTH_RATE_LIMIT)
@inject
async def login(
    request: Request,
    body: CredentialsRequest,
    handler: FromDishka[LoginHandler],
):
    result = await handler.execute(LoginCommand(email=body.email, password=body.password))
    return AuthResultDTO(user=UserDTO.from_entity(result.user), token=result.token)


@router.get("/me", response_model=UserDTO)
@inject
async def me(
    handler: FromDishka[GetCurrentUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetCurrentUserQuery(user_email=current_user.email))
    return UserDTO.from_entity(user)
