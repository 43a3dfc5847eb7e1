"""
ContributionId Value Object - UUID wrapper for contribution identity.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class ContributionId:
    value: str

    def __post_init__(self):
        try:
            UUID(self.value)
        except (TypeError, ValueError):
            raise ValueError(
                f"Invalid contribution ID (UUID): {self.value}"
            ) from None

    def __str__(self) -> str:
        return self.value
