"""
User Repository Port - Interface for user persistence.
Implementation: growthkit/infrastructure/persistence/kv_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from growthkit.domain.entities.user import User
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_email(self, email: UserEmail) -> Optional[User]: ...

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def exists(self, email: UserEmail) -> bool: ...

    @abstractmethod
    async def list_all(self) -> list[User]: ...

    @abstractmethod
    async def save(self, user: User) -> None: ...
