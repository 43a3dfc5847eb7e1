"""Resolve the authenticated caller to a stored user."""

from growthkit.domain.entities.user import User
from growthkit.domain.exceptions import AccessDeniedError, AuthenticationError
from growthkit.domain.ports.repositories import UserRepository
from growthkit.domain.value_objects.user_email import UserEmail


async def load_actor(user_repository: UserRepository, email: UserEmail) -> User:
    """A valid token for a user that no longer exists is still unauthorized."""
    user = await user_repository.get_by_email(email)
    if not user:
        raise AuthenticationError("Unauthorized")
    return user


async def load_admin(user_repository: UserRepository, email: UserEmail) -> User:
    user = await user_repository.get_by_email(email)
    if not user or not user.is_admin:
        raise AccessDeniedError("Forbidden")
    return user
