"""
DomainValidationError - Raised when a business rule is violated.
InvalidInputError - Raised when a calculator receives malformed input.
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(DomainValidationError):
    """Malformed input to a pure calculator. Never retried."""
