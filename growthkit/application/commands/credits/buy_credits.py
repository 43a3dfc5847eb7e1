"""
Buy Credits Command.

Payments are mocked: the requested amount is added to the balance.
"""

from dataclasses import dataclass
from growthkit.application.common.actors import load_actor
from growthkit.application.common.interfaces import Command, CommandHandler
from growthkit.domain.entities.user import User
from growthkit.domain.ports.repositories import UserRepository
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.observability.metrics import CreditSource, increment_credits_earned


@dataclass(frozen=True)
class BuyCreditsCommand(Command[User]):
    user_email: UserEmail
    credits: int


class BuyCreditsHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: BuyCreditsCommand) -> User:
        user = await load_actor(self._user_repository, command.user_email)
        user.add_credits(command.credits)
        await self._user_repository.save(user)
        increment_credits_earned(CreditSource.PURCHASE, command.credits)
        return user
