"""
Application handler tests against the in-memory store.

Handlers are async; each test drives one scenario with asyncio.run.
"""

import asyncio
from pathlib import Path
import pytest
from growthkit.application.commands.auth import (
    LoginCommand,
    LoginHandler,
    SignupCommand,
    SignupHandler,
)
from growthkit.application.commands.contributions import (
    ApproveContributionCommand,
    ApproveContributionHandler,
    RejectContributionCommand,
    RejectContributionHandler,
    SubmitContributionCommand,
    SubmitContributionHandler,
)
from growthkit.application.commands.credits import BuyCreditsCommand, BuyCreditsHandler
from growthkit.application.commands.reviews import CreateReviewCommand, CreateReviewHandler
from growthkit.application.commands.tools import (
    DeleteToolCommand,
    DeleteToolHandler,
    UnlockToolCommand,
    UnlockToolHandler,
)
from growthkit.application.queries.calculators import (
    CalculateABTestHandler,
    CalculateABTestQuery,
)
from growthkit.application.queries.reviews import ListToolReviewsHandler, ListToolReviewsQuery
from growthkit.application.queries.tools import ListToolsHandler, ListToolsQuery
from growthkit.config.settings import Config
from growthkit.domain.entities.contribution import ContributionStatus
from growthkit.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    DomainValidationError,
    EntityNotFoundError,
)
from growthkit.domain.services import ABTestInput, SignificanceCalculator
from growthkit.domain.value_objects import ToolId, UserEmail
from growthkit.infrastructure.persistence import (
    KVContributionRepository,
    KVReviewRepository,
    KVToolRepository,
    KVUserRepository,
)
from growthkit.infrastructure.security import JwtTokenService, PasslibPasswordHasher
from growthkit.infrastructure.store import MemoryBackend

SEED_FILE = str(Path(__file__).resolve().parent.parent / "growthkit" / "data" / "seed_tools.json")


class World:
    """Repositories and handlers sharing one in-memory backend."""

    def __init__(self):
        backend = MemoryBackend()
        self.users = KVUserRepository(backend)
        self.tools = KVToolRepository(backend)
        self.contributions = KVContributionRepository(backend)
        self.reviews = KVReviewRepository(backend)
        self.hasher = PasslibPasswordHasher(rounds=1000)
        self.tokens = JwtTokenService(secret="test", issuer="i", audience="a")

    async def signup(self, email, password="secret123"):
        handler = SignupHandler(self.users, self.hasher, self.tokens)
        return await handler.execute(SignupCommand(email=email, password=password))

    async def seed(self):
        return await ListToolsHandler(self.tools, seed_file=SEED_FILE).execute(ListToolsQuery())

    async def unlock(self, email, tool_id):
        handler = UnlockToolHandler(self.users, self.tools)
        return await handler.execute(
            UnlockToolCommand(user_email=UserEmail(email), tool_id=ToolId(tool_id))
        )

    async def review(self, email, tool_id, rating=5, comment="Great tool"):
        handler = CreateReviewHandler(self.users, self.tools, self.reviews)
        return await handler.execute(
            CreateReviewCommand(
                user_email=UserEmail(email),
                tool_id=ToolId(tool_id),
                rating=rating,
                comment=comment,
            )
        )

    async def submit(self, email):
        handler = SubmitContributionHandler(self.users, self.contributions)
        return await handler.execute(
            SubmitContributionCommand(
                user_email=UserEmail(email),
                tool_name="Landing Page Grader",
                tool_url="https://example.com/grader",
                description="Scores landing pages against conversion best practices.",
            )
        )


@pytest.fixture()
def world():
    return World()


class TestAuth:
    def test_signup_grants_starting_credits(self, world):
        result = asyncio.run(world.signup("New@Example.com"))

        assert result.user.email.value == "new@example.com"
        assert result.user.credits == Config.STARTING_CREDITS
        assert result.user.is_admin is False
        assert world.tokens.decode(result.token) == result.user.email

    def test_admin_email_is_flagged(self, world):
        result = asyncio.run(world.signup(Config.ADMIN_EMAIL))
        assert result.user.is_admin is True

    def test_duplicate_email(self, world):
        async def scenario():
            await world.signup("dup@example.com")
            await world.signup("DUP@example.com")

        with pytest.raises(DomainValidationError, match="already exists"):
            asyncio.run(scenario())

    @pytest.mark.parametrize("email, password", [("bad-email", "secret123"), ("a@b.co", "12345")])
    def test_signup_validation(self, world, email, password):
        with pytest.raises(DomainValidationError):
            asyncio.run(world.signup(email, password))

    def test_login(self, world):
        async def scenario():
            await world.signup("member@example.com")
            handler = LoginHandler(world.users, world.hasher, world.tokens)
            return await handler.execute(
                LoginCommand(email="member@example.com", password="secret123")
            )

        assert asyncio.run(scenario()).user.email.value == "member@example.com"

    @pytest.mark.parametrize("email, password", [("member@example.com", "wrong-pass"), ("ghost@example.com", "secret123")])
    def test_login_rejects(self, world, email, password):
        async def scenario():
            await world.signup("member@example.com")
            handler = LoginHandler(world.users, world.hasher, world.tokens)
            await handler.execute(LoginCommand(email=email, password=password))

        with pytest.raises(AuthenticationError, match="Invalid credentials."):
            asyncio.run(scenario())


class TestCatalog:
    def test_seeds_once(self, world):
        async def scenario():
            first = await world.seed()
            second = await world.seed()
            return first, second

        first, second = asyncio.run(scenario())
        assert len(first) == 6
        assert [t.id for t in first] == [t.id for t in second]

    def test_unlock(self, world):
        async def scenario():
            await world.seed()
            await world.signup("member@example.com")
            return await world.unlock("member@example.com", "1")

        result = asyncio.run(scenario())
        assert result.user.credits == Config.STARTING_CREDITS - result.tool.cost
        assert result.user.has_unlocked(ToolId("1"))

    def test_unlock_missing_tool(self, world):
        async def scenario():
            await world.signup("member@example.com")
            await world.unlock("member@example.com", "missing")

        with pytest.raises(EntityNotFoundError):
            asyncio.run(scenario())

    def test_unlock_unknown_user(self, world):
        with pytest.raises(AuthenticationError):
            asyncio.run(world.unlock("ghost@example.com", "1"))

    def test_buy_credits(self, world):
        async def scenario():
            await world.signup("member@example.com")
            handler = BuyCreditsHandler(world.users)
            await handler.execute(
                BuyCreditsCommand(user_email=UserEmail("member@example.com"), credits=20)
            )
            return await world.users.get_by_email(UserEmail("member@example.com"))

        assert asyncio.run(scenario()).credits == Config.STARTING_CREDITS + 20

    def test_delete_requires_admin(self, world):
        async def scenario():
            await world.seed()
            await world.signup("member@example.com")
            handler = DeleteToolHandler(world.users, world.tools)
            await handler.execute(
                DeleteToolCommand(
                    admin_email=UserEmail("member@example.com"), tool_id=ToolId("1")
                )
            )

        with pytest.raises(AccessDeniedError, match="Forbidden"):
            asyncio.run(scenario())


class TestReviews:
    def test_review_requires_unlock(self, world):
        async def scenario():
            await world.seed()
            await world.signup("member@example.com")
            await world.review("member@example.com", "1")

        with pytest.raises(AccessDeniedError, match="unlock this tool"):
            asyncio.run(scenario())

    def test_review_rewards_and_rates(self, world):
        async def scenario():
            await world.seed()
            await world.signup("member@example.com")
            await world.unlock("member@example.com", "1")
            review = await world.review("member@example.com", "1", rating=4)
            user = await world.users.get_by_email(UserEmail("member@example.com"))
            tool = await world.tools.get_by_id(ToolId("1"))
            return review, user, tool

        review, user, tool = asyncio.run(scenario())
        assert review.rating == 4
        assert user.credits == Config.STARTING_CREDITS - tool.cost + Config.CREDIT_REWARD_FOR_REVIEW
        assert tool.review_count == 1
        assert tool.rating == pytest.approx(4.0)

    def test_one_review_per_tool(self, world):
        async def scenario():
            await world.seed()
            await world.signup("member@example.com")
            await world.unlock("member@example.com", "1")
            await world.review("member@example.com", "1")
            await world.review("member@example.com", "1")

        with pytest.raises(DomainValidationError, match="already reviewed"):
            asyncio.run(scenario())

    @pytest.mark.parametrize("rating, comment", [(0, "ok"), (6, "ok"), (5, "   ")])
    def test_review_validation(self, world, rating, comment):
        async def scenario():
            await world.seed()
            await world.signup("member@example.com")
            await world.unlock("member@example.com", "1")
            await world.review("member@example.com", "1", rating=rating, comment=comment)

        with pytest.raises(DomainValidationError):
            asyncio.run(scenario())

    def test_reviews_listed_newest_first(self, world):
        async def scenario():
            await world.seed()
            for email in ("one@example.com", "two@example.com"):
                await world.signup(email)
                await world.unlock(email, "1")
                await world.review(email, "1")
            return await ListToolReviewsHandler(world.reviews).execute(
                ListToolReviewsQuery(tool_id=ToolId("1"))
            )

        reviews = asyncio.run(scenario())
        assert [r.user_email.value for r in reviews] == ["two@example.com", "one@example.com"]


class TestContributions:
    def test_approve_publishes_tool_and_rewards(self, world):
        async def scenario():
            await world.signup(Config.ADMIN_EMAIL)
            await world.signup("member@example.com")
            contribution = await world.submit("member@example.com")
            handler = ApproveContributionHandler(world.users, world.tools, world.contributions)
            approved = await handler.execute(
                ApproveContributionCommand(
                    admin_email=UserEmail(Config.ADMIN_EMAIL),
                    contribution_id=contribution.id,
                )
            )
            member = await world.users.get_by_email(UserEmail("member@example.com"))
            return approved, member, await world.tools.list_all()

        approved, member, tools = asyncio.run(scenario())
        assert approved.status is ContributionStatus.APPROVED
        assert member.credits == Config.STARTING_CREDITS + Config.CREDIT_REWARD_FOR_CONTRIBUTION
        assert [t.title for t in tools] == ["Landing Page Grader"]
        assert tools[0].cost == Config.COMMUNITY_TOOL_COST

    def test_reject_then_approve_fails(self, world):
        async def scenario():
            await world.signup(Config.ADMIN_EMAIL)
            await world.signup("member@example.com")
            contribution = await world.submit("member@example.com")
            admin = UserEmail(Config.ADMIN_EMAIL)
            await RejectContributionHandler(world.users, world.contributions).execute(
                RejectContributionCommand(admin_email=admin, contribution_id=contribution.id)
            )
            await ApproveContributionHandler(
                world.users, world.tools, world.contributions
            ).execute(
                ApproveContributionCommand(admin_email=admin, contribution_id=contribution.id)
            )

        with pytest.raises(DomainValidationError, match="already been reviewed"):
            asyncio.run(scenario())

    @pytest.mark.parametrize(
        "tool_name, tool_url, description",
        [
            ("ab", "https://example.com", "A description that is long enough."),
            ("Grader", "ftp://example.com", "A description that is long enough."),
            ("Grader", "https://example.com", "Too short."),
        ],
    )
    def test_submit_validation(self, world, tool_name, tool_url, description):
        async def scenario():
            await world.signup("member@example.com")
            await SubmitContributionHandler(world.users, world.contributions).execute(
                SubmitContributionCommand(
                    user_email=UserEmail("member@example.com"),
                    tool_name=tool_name,
                    tool_url=tool_url,
                    description=description,
                )
            )

        with pytest.raises(DomainValidationError):
            asyncio.run(scenario())


class TestCalculatorQueries:
    def test_requires_known_user(self, world):
        handler = CalculateABTestHandler(world.users, SignificanceCalculator())
        query = CalculateABTestQuery(
            user_email=UserEmail("ghost@example.com"),
            data=ABTestInput(visitors_a=100, conversions_a=10, visitors_b=100, conversions_b=20),
        )
        with pytest.raises(AuthenticationError):
            asyncio.run(handler.execute(query))

    def test_does_not_touch_balance(self, world):
        async def scenario():
            await world.signup("member@example.com")
            handler = CalculateABTestHandler(world.users, SignificanceCalculator())
            result = await handler.execute(
                CalculateABTestQuery(
                    user_email=UserEmail("member@example.com"),
                    data=ABTestInput(
                        visitors_a=1000, conversions_a=100, visitors_b=1000, conversions_b=150
                    ),
                )
            )
            user = await world.users.get_by_email(UserEmail("member@example.com"))
            return result, user

        result, user = asyncio.run(scenario())
        assert result.winner == "B"
        assert user.credits == Config.STARTING_CREDITS
