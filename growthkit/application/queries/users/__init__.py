"""User queries."""

from growthkit.application.queries.users.get_current_user import (
    GetCurrentUserQuery,
    GetCurrentUserHandler,
)

__all__ = [
    "GetCurrentUserQuery",
    "GetCurrentUserHandler",
]
