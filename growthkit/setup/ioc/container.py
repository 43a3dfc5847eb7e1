"""
Dishka DI Container Setup.

- Scope.APP: created once per container (store backend, security, calculators)
- Scope.REQUEST: new instance per HTTP request (repositories, handlers)

Flow:
  Container → KeyValueBackend → KVToolRepository → UnlockToolHandler
                                       ↓
                              uses ToolRepository interface
"""

from logging import getLogger
from typing import AsyncIterator
from dishka import Provider, Scope, make_async_container, provide, AsyncContainer
from growthkit.application.commands.auth import LoginHandler, SignupHandler
from growthkit.application.commands.contributions import (
    ApproveContributionHandler,
    RejectContributionHandler,
    SubmitContributionHandler,
)
from growthkit.application.commands.credits import BuyCreditsHandler
from growthkit.application.commands.reviews import CreateReviewHandler
from growthkit.application.commands.tools import (
    DeleteToolHandler,
    UnlockToolHandler,
    UpdateToolHandler,
)
from growthkit.application.queries.calculators import (
    CalculateABTestHandler,
    GenerateHeadlinesHandler,
    ScoreSubjectLineHandler,
)
from growthkit.application.queries.contributions import (
    ListAllContributionsHandler,
    ListMyContributionsHandler,
)
from growthkit.application.queries.reviews import ListToolReviewsHandler
from growthkit.application.queries.tools import (
    GetToolHandler,
    ListAdminToolsHandler,
    ListToolsHandler,
)
from growthkit.application.queries.users import GetCurrentUserHandler
from growthkit.config.settings import Config
from growthkit.domain.ports.repositories import (
    ContributionRepository,
    ReviewRepository,
    ToolRepository,
    UserRepository,
)
from growthkit.domain.ports.security import PasswordHasher, TokenService
from growthkit.domain.services import (
    HeadlineGenerator,
    SignificanceCalculator,
    SubjectLineScorer,
)
from growthkit.infrastructure.persistence import (
    KVContributionRepository,
    KVReviewRepository,
    KVToolRepository,
    KVUserRepository,
)
from growthkit.infrastructure.security import JwtTokenService, PasslibPasswordHasher
from growthkit.infrastructure.store import (
    KeyValueBackend,
    MemoryBackend,
    RedisBackend,
    close_redis_client,
    create_redis_client,
)

logger = getLogger(__name__)


class AppProvider(Provider):
    """
    Application dependency provider.

    Return types are the ABSTRACT ports; the bodies pick the implementation.
    """

    # ==================== STORE ====================
    @provide(scope=Scope.APP)
    async def get_backend(self) -> AsyncIterator[KeyValueBackend]:
        """
        Provide the key-value backend (singleton, app-scoped).

        The redis client is closed when the container closes.
        """
        if Config.STORE_BACKEND == "redis":
            redis = await create_redis_client(Config.REDIS_URL)
            logger.info("[Store] Using redis backend")
            try:
                yield RedisBackend(redis, prefix=Config.STORE_KEY_PREFIX)
            finally:
                await close_redis_client(redis)
        else:
            logger.info("[Store] Using in-memory backend")
            yield MemoryBackend()

    # ==================== SECURITY ====================
    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return PasslibPasswordHasher(rounds=Config.PASSWORD_HASH_ROUNDS)

    @provide(scope=Scope.APP)
    def get_token_service(self) -> TokenService:
        return JwtTokenService()

    # ==================== DOMAIN SERVICES ====================
    @provide(scope=Scope.APP)
    def get_significance_calculator(self) -> SignificanceCalculator:
        return SignificanceCalculator()

    subject_line_scorer = provide(SubjectLineScorer, scope=Scope.APP)
    headline_generator = provide(HeadlineGenerator, scope=Scope.APP)

    # ==================== REPOSITORIES ====================
    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, backend: KeyValueBackend) -> UserRepository:
        return KVUserRepository(backend)

    @provide(scope=Scope.REQUEST)
    def get_tool_repository(self, backend: KeyValueBackend) -> ToolRepository:
        return KVToolRepository(backend)

    @provide(scope=Scope.REQUEST)
    def get_contribution_repository(
        self, backend: KeyValueBackend
    ) -> ContributionRepository:
        return KVContributionRepository(backend)

    @provide(scope=Scope.REQUEST)
    def get_review_repository(self, backend: KeyValueBackend) -> ReviewRepository:
        return KVReviewRepository(backend)

    # ==================== HANDLERS ====================
    # Constructor arguments are auto-wired from the providers above
    signup_handler = provide(SignupHandler, scope=Scope.REQUEST)
    login_handler = provide(LoginHandler, scope=Scope.REQUEST)
    get_current_user_handler = provide(GetCurrentUserHandler, scope=Scope.REQUEST)

    get_tool_handler = provide(GetToolHandler, scope=Scope.REQUEST)
    list_admin_tools_handler = provide(ListAdminToolsHandler, scope=Scope.REQUEST)
    unlock_tool_handler = provide(UnlockToolHandler, scope=Scope.REQUEST)
    update_tool_handler = provide(UpdateToolHandler, scope=Scope.REQUEST)
    delete_tool_handler = provide(DeleteToolHandler, scope=Scope.REQUEST)

    buy_credits_handler = provide(BuyCreditsHandler, scope=Scope.REQUEST)

    submit_contribution_handler = provide(SubmitContributionHandler, scope=Scope.REQUEST)
    approve_contribution_handler = provide(
        ApproveContributionHandler, scope=Scope.REQUEST
    )
    reject_contribution_handler = provide(RejectContributionHandler, scope=Scope.REQUEST)
    list_my_contributions_handler = provide(
        ListMyContributionsHandler, scope=Scope.REQUEST
    )
    list_all_contributions_handler = provide(
        ListAllContributionsHandler, scope=Scope.REQUEST
    )

    create_review_handler = provide(CreateReviewHandler, scope=Scope.REQUEST)
    list_tool_reviews_handler = provide(ListToolReviewsHandler, scope=Scope.REQUEST)

    calculate_ab_test_handler = provide(CalculateABTestHandler, scope=Scope.REQUEST)
    score_subject_line_handler = provide(ScoreSubjectLineHandler, scope=Scope.REQUEST)
    generate_headlines_handler = provide(GenerateHeadlinesHandler, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def get_list_tools_handler(self, tool_repository: ToolRepository) -> ListToolsHandler:
        return ListToolsHandler(tool_repository, seed_file=Config.SEED_TOOLS_FILE)


def create_container() -> AsyncContainer:
    return make_async_container(AppProvider())
