"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.
"""

from contextlib import asynccontextmanager
from logging import getLogger
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from slowapi.errors import RateLimitExceeded

from growthkit.config.logging_config import setup_logging
from growthkit.config.settings import Config
from growthkit.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    DomainValidationError,
    EntityNotFoundError,
)
from growthkit.observability.metrics import MetricsErrorType, increment_error
from growthkit.presentation.api import (
    admin_router,
    auth_router,
    calculators_router,
    contributions_router,
    credits_router,
    metrics_router,
    tools_router,
)
from growthkit.presentation.middleware import CorrelationIdMiddleware, MetricsMiddleware
from growthkit.presentation.rate_limit import limiter
from growthkit.setup.ioc.container import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = getLogger(__name__)

HTTP_ERROR_TYPES = {
    status.HTTP_400_BAD_REQUEST: MetricsErrorType.VALIDATION,
    status.HTTP_401_UNAUTHORIZED: MetricsErrorType.UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: MetricsErrorType.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: MetricsErrorType.NOT_FOUND,
}


def _error(status_code: int, message: str, error_type: str) -> JSONResponse:
    increment_error(error_type)
    return JSONResponse(status_code=status_code, content={"error": message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: container and Dishka are already set up by the factory.
    Shutdown: close the DI container (disconnects redis, if used).
    """
    logger.info("GrowthKit API started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("GrowthKit API shutdown. DI container closed.")


def create_fastapi_app(container: AsyncContainer | None = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Each app gets its own container unless one is passed in, so every test app
    starts with an empty in-memory store.
    """
    app = FastAPI(
        title="GrowthKit API",
        description="Marketing tools marketplace with credits, contributions and calculators",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.state.limiter = limiter

    app.add_middleware(MetricsMiddleware)
    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ==================== EXCEPTION HANDLERS ====================
    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc), MetricsErrorType.VALIDATION)

    @app.exception_handler(AuthenticationError)
    async def authentication_handler(request: Request, exc: AuthenticationError):
        return _error(
            status.HTTP_401_UNAUTHORIZED, str(exc), MetricsErrorType.UNAUTHORIZED
        )

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(request: Request, exc: AccessDeniedError):
        return _error(status.HTTP_403_FORBIDDEN, str(exc), MetricsErrorType.FORBIDDEN)

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, str(exc), MetricsErrorType.NOT_FOUND)

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(f"[RateLimit] {request.url.path}: {exc.detail}")
        return _error(
            status.HTTP_429_TOO_MANY_REQUESTS,
            "Too many requests. Please try again later.",
            MetricsErrorType.RATE_LIMITED,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.info(f"[Validation] {request.url.path}: {errors}")
        increment_error(MetricsErrorType.VALIDATION)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation error", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        increment_error(HTTP_ERROR_TYPES.get(exc.status_code, MetricsErrorType.INTERNAL))
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[Unhandled] {type(exc).__name__}: {exc}")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            MetricsErrorType.INTERNAL,
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "GrowthKit API is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers. Calculators first: their fixed paths share /api/tools
    app.include_router(auth_router)
    app.include_router(calculators_router)
    app.include_router(tools_router)
    app.include_router(credits_router)
    app.include_router(contributions_router)
    app.include_router(admin_router)
    app.include_router(metrics_router)

    return app


# Create the app instance
app = create_fastapi_app()
