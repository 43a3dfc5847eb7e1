"""
Signup Command.

New members start with Config.STARTING_CREDITS. The configured admin email
is flagged as admin at signup; there is no other way to become one.
"""

from dataclasses import dataclass
from logging import getLogger
from growthkit.application.common.interfaces import Command, CommandHandler
from growthkit.config.settings import Config
from growthkit.domain.entities.user import User
from growthkit.domain.exceptions import DomainValidationError
from growthkit.domain.ports.repositories import UserRepository
from growthkit.domain.ports.security import PasswordHasher, TokenService
from growthkit.domain.value_objects.user_email import UserEmail

logger = getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    user: User
    token: str


@dataclass(frozen=True)
class SignupCommand(Command[AuthResult]):
    email: str
    password: str


class SignupHandler(CommandHandler[AuthResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def execute(self, command: SignupCommand) -> AuthResult:
        if (
            not isinstance(command.password, str)
            or len(command.password) < Config.MIN_PASSWORD_LENGTH
        ):
            raise DomainValidationError(
                "Valid email and a password of at least "
                f"{Config.MIN_PASSWORD_LENGTH} characters are required."
            )
        try:
            email = UserEmail(command.email)
        except ValueError as e:
            raise DomainValidationError(
                "Valid email and a password of at least "
                f"{Config.MIN_PASSWORD_LENGTH} characters are required."
            ) from e

        if await self._user_repository.exists(email):
            raise DomainValidationError("A user with this email already exists.")

        user = User.create(
            email=email,
            password_hash=self._password_hasher.hash(command.password),
            starting_credits=Config.STARTING_CREDITS,
            is_admin=email.value == Config.ADMIN_EMAIL,
        )
        await self._user_repository.save(user)
        logger.info(f"[Signup] New user {user.id.value} (admin={user.is_admin})")

        return AuthResult(user=user, token=self._token_service.issue(email))
