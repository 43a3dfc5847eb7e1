"""
Security Ports - password hashing and bearer token handling.
Implementations: growthkit/infrastructure/security/
"""

from abc import ABC, abstractmethod
from growthkit.domain.value_objects.user_email import UserEmail


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str: ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool: ...


class TokenService(ABC):
    @abstractmethod
    def issue(self, email: UserEmail) -> str: ...

    @abstractmethod
    def decode(self, token: str) -> UserEmail:
        """Return the token subject or raise AuthenticationError."""
        ...
