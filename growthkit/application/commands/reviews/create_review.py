"""
Create Review Command.

Only members who unlocked a tool may review it, once. Each review earns
Config.CREDIT_REWARD_FOR_REVIEW and is folded into the tool's running rating.
"""

from dataclasses import dataclass
from growthkit.application.common.actors import load_actor
from growthkit.application.common.interfaces import Command, CommandHandler
from growthkit.config.settings import Config
from growthkit.domain.entities.review import MAX_RATING, MIN_RATING, Review
from growthkit.domain.exceptions import AccessDeniedError, DomainValidationError
from growthkit.domain.ports.repositories import (
    ReviewRepository,
    ToolRepository,
    UserRepository,
)
from growthkit.domain.value_objects.tool_id import ToolId
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.observability.metrics import CreditSource, increment_credits_earned


@dataclass(frozen=True)
class CreateReviewCommand(Command[Review]):
    user_email: UserEmail
    tool_id: ToolId
    rating: int
    comment: str


class CreateReviewHandler(CommandHandler[Review]):
    def __init__(
        self,
        user_repository: UserRepository,
        tool_repository: ToolRepository,
        review_repository: ReviewRepository,
    ):
        self._user_repository = user_repository
        self._tool_repository = tool_repository
        self._review_repository = review_repository

    async def execute(self, command: CreateReviewCommand) -> Review:
        user = await load_actor(self._user_repository, command.user_email)

        rating = command.rating
        comment = command.comment.strip() if isinstance(command.comment, str) else ""
        if (
            isinstance(rating, bool)
            or not isinstance(rating, int)
            or not MIN_RATING <= rating <= MAX_RATING
            or not comment
        ):
            raise DomainValidationError(
                "A rating between 1 and 5 and a comment are required."
            )

        if not user.has_unlocked(command.tool_id):
            raise AccessDeniedError("You must unlock this tool to review it.")

        existing = await self._review_repository.get_by_user_and_tool(
            user.id, command.tool_id
        )
        if existing:
            raise DomainValidationError("You have already reviewed this tool.")

        review = Review.create(
            user_id=user.id,
            user_email=user.email,
            tool_id=command.tool_id,
            rating=rating,
            comment=comment,
        )
        await self._review_repository.save(review)

        if Config.CREDIT_REWARD_FOR_REVIEW > 0:
            user.add_credits(Config.CREDIT_REWARD_FOR_REVIEW)
            await self._user_repository.save(user)
            increment_credits_earned(
                CreditSource.REVIEW, Config.CREDIT_REWARD_FOR_REVIEW
            )

        # The tool may have been removed after it was unlocked
        tool = await self._tool_repository.get_by_id(command.tool_id)
        if tool:
            tool.add_rating(rating)
            await self._tool_repository.save(tool)

        return review
