"""Shared slowapi limiter for the auth and calculator routes."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from growthkit.config.settings import Config

limiter = Limiter(
    key_func=get_remote_address,
    enabled=Config.RATELIMIT_ENABLED,
    storage_uri=Config.RATELIMIT_STORAGE_URI,
)
# slowapi reads RATELIMIT_ENABLED from the environment itself and keeps it as a raw string
limiter.enabled = Config.RATELIMIT_ENABLED
