"""
UserEmail Value Object - Wraps user email with validation.

Emails are the store key for users, so they are normalised to lower case.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserEmail:
    value: str  # user_email, presented as email

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError(f"Invalid user email: {self.value}")
        normalised = self.value.strip().lower()
        local, _, domain = normalised.partition("@")
        if not local or not domain or " " in normalised:
            raise ValueError(f"Invalid user email: {self.value}")
        object.__setattr__(self, "value", normalised)

    def __str__(self) -> str:
        return self.value
