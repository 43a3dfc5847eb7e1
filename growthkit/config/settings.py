"""Application configuration settings"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    # Server settings
    TESTING = _flag("TESTING", "false")
    DEBUG = _flag("DEBUG", "false")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Entity store: "memory" or "redis"
    STORE_BACKEND = os.getenv("STORE_BACKEND", "memory").lower()
    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    STORE_KEY_PREFIX = os.getenv("STORE_KEY_PREFIX", "growthkit")

    # Auth
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "dev-only-secret-change-me")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "growthkit")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "growthkit-web")
    TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", str(7 * 24 * 3600)))
    PASSWORD_HASH_ROUNDS = int(os.getenv("PASSWORD_HASH_ROUNDS", "29000"))
    MIN_PASSWORD_LENGTH = int(os.getenv("MIN_PASSWORD_LENGTH", "6"))
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@growthkit.com").lower()

    # Credits economy
    STARTING_CREDITS = int(os.getenv("STARTING_CREDITS", "5"))
    CREDIT_REWARD_FOR_CONTRIBUTION = int(
        os.getenv("CREDIT_REWARD_FOR_CONTRIBUTION", "10")
    )
    CREDIT_REWARD_FOR_REVIEW = int(os.getenv("CREDIT_REWARD_FOR_REVIEW", "1"))
    COMMUNITY_TOOL_COST = int(os.getenv("COMMUNITY_TOOL_COST", "2"))
    COMMUNITY_TOOL_IMAGE_URL = os.getenv(
        "COMMUNITY_TOOL_IMAGE_URL",
        "https://images.unsplash.com/photo-1587440871875-191322ee64b0?q=80&w=800&auto=format&fit=crop",
    )

    # Catalog
    SEED_TOOLS_FILE = os.getenv(
        "SEED_TOOLS_FILE",
        str(Path(__file__).resolve().parent.parent / "data" / "seed_tools.json"),
    )

    # Rate limiting
    RATELIMIT_ENABLED = _flag("RATELIMIT_ENABLED", "true")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    AUTH_RATE_LIMIT = os.getenv("AUTH_RATE_LIMIT", "10/minute;100/day")
    CALCULATOR_RATE_LIMIT = os.getenv("CALCULATOR_RATE_LIMIT", "30/minute;1000/day")

    # CORS
    CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
