"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from growthkit.domain.exceptions.entity_not_found import EntityNotFoundError
from growthkit.domain.exceptions.access_denied import AccessDeniedError
from growthkit.domain.exceptions.authentication import AuthenticationError
from growthkit.domain.exceptions.validation_error import (
    DomainValidationError,
    InvalidInputError,
)

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "AuthenticationError",
    "DomainValidationError",
    "InvalidInputError",
]
