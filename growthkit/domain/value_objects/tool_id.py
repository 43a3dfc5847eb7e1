"""
ToolId Value Object - Seeded tools use readable slugs, contributed tools use UUIDs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolId:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("ToolId cannot be empty")
        if "/" in self.value or ":" in self.value:
            raise ValueError(f"Invalid tool ID: {self.value}")

    def __str__(self) -> str:
        return self.value
