"""
AuthenticationError - Raised when credentials or a bearer token are not valid.
Maps to: HTTP 401 Unauthorized
"""


class AuthenticationError(Exception):
    """Exception raised when the caller cannot be authenticated."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
