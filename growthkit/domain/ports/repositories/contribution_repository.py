"""
Contribution Repository Port - Interface for contribution persistence.
Implementation: growthkit/infrastructure/persistence/kv_contribution_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from growthkit.domain.entities.contribution import Contribution
from growthkit.domain.value_objects.contribution_id import ContributionId
from growthkit.domain.value_objects.user_id import UserId


class ContributionRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, contribution_id: ContributionId
    ) -> Optional[Contribution]: ...

    @abstractmethod
    async def list_all(self) -> list[Contribution]: ...

    @abstractmethod
    async def list_by_user(self, user_id: UserId) -> list[Contribution]: ...

    @abstractmethod
    async def save(self, contribution: Contribution) -> None: ...
