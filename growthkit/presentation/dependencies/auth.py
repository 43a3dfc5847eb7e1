"""
Authentication Dependency for FastAPI.

- Extracts the bearer token from the Authorization header
- Decodes it with the same secret/issuer/audience used to issue it
- Raises HTTPException 401 if the token is missing or invalid
"""

from dataclasses import dataclass
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from growthkit.domain.exceptions import AuthenticationError
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.infrastructure.security import JwtTokenService


@dataclass
class AuthUser:
    email: UserEmail


# auto_error=False so a missing header answers 401 rather than 403
security = HTTPBearer(auto_error=False)
token_service = JwtTokenService()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthUser:
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )

    try:
        email = token_service.decode(credentials.credentials)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e

    return AuthUser(email=email)
