"""Authentication commands."""

from .signup import AuthResult, SignupCommand, SignupHandler
from .login import LoginCommand, LoginHandler

__all__ = [
    "AuthResult",
    "SignupCommand",
    "SignupHandler",
    "LoginCommand",
    "LoginHandler",
]
