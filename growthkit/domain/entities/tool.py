"""
Tool Entity - A marketplace listing that members unlock with credits.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4
from growthkit.domain.exceptions import DomainValidationError
from growthkit.domain.value_objects.tool_id import ToolId

# Fields an admin may change through a partial update
EDITABLE_FIELDS = (
    "title",
    "description",
    "category",
    "cost",
    "tags",
    "image_url",
    "content",
)


@dataclass
class Tool:
    id: ToolId
    title: str
    description: str
    category: str
    cost: int
    tags: list[str] = field(default_factory=list)
    image_url: str = ""
    content: str = ""
    rating: float = 0.0
    review_count: int = 0

    def __post_init__(self):
        if self.cost < 0:
            raise ValueError(f"Tool cost cannot be negative: {self.cost}")

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        category: str,
        cost: int,
        tags: list[str] | None = None,
        image_url: str = "",
        content: str = "",
    ) -> Tool:
        return cls(
            id=ToolId(str(uuid4())),
            title=title,
            description=description,
            category=category,
            cost=cost,
            tags=list(tags or []),
            image_url=image_url,
            content=content,
        )

    def add_rating(self, rating: int) -> None:
        """Fold a new review into the running average."""
        total = self.rating * self.review_count + rating
        self.review_count += 1
        self.rating = total / self.review_count

    def apply_patch(self, changes: dict[str, Any]) -> None:
        """
        Apply a partial update from an admin.

        Unknown keys are rejected. Rating and review count are derived from
        reviews and cannot be edited directly.
        """
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise DomainValidationError(
                f"Fields cannot be edited: {', '.join(sorted(unknown))}"
            )

        if "title" in changes:
            self._require_text(changes["title"], "Title", 3)
        if "description" in changes:
            self._require_text(changes["description"], "Description", 10)
        if "category" in changes:
            self._require_text(changes["category"], "Category", 2)
        if "cost" in changes:
            cost = changes["cost"]
            if isinstance(cost, bool) or not isinstance(cost, int) or cost < 0:
                raise DomainValidationError("Cost cannot be negative.")
        if "tags" in changes:
            tags = changes["tags"]
            if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
                raise DomainValidationError("Tags must be a list of strings.")
            changes = {**changes, "tags": [t.strip() for t in tags if t.strip()]}
        for name in ("image_url", "content"):
            if name in changes and not isinstance(changes[name], str):
                raise DomainValidationError(f"{name} must be a string.")

        for name, value in changes.items():
            setattr(self, name, value)

    @staticmethod
    def _require_text(value: Any, label: str, min_length: int) -> None:
        if not isinstance(value, str) or len(value.strip()) < min_length:
            raise DomainValidationError(
                f"{label} must be at least {min_length} characters."
            )
