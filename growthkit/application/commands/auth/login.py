"""Login Command."""

from dataclasses import dataclass
from growthkit.application.commands.auth.signup import AuthResult
from growthkit.application.common.interfaces import Command, CommandHandler
from growthkit.domain.exceptions import AuthenticationError
from growthkit.domain.ports.repositories import UserRepository
from growthkit.domain.ports.security import PasswordHasher, TokenService
from growthkit.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class LoginCommand(Command[AuthResult]):
    email: str
    password: str


class LoginHandler(CommandHandler[AuthResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def execute(self, command: LoginCommand) -> AuthResult:
        try:
            email = UserEmail(command.email)
        except ValueError as e:
            raise AuthenticationError("Invalid credentials.") from e

        user = await self._user_repository.get_by_email(email)
        if not user or not self._password_hasher.verify(
            command.password, user.password_hash
        ):
            raise AuthenticationError("Invalid credentials.")

        return AuthResult(user=user, token=self._token_service.issue(user.email))
