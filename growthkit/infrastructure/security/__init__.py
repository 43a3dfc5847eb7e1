from growthkit.infrastructure.security.password_hasher import PasslibPasswordHasher
from growthkit.infrastructure.security.jwt_token_service import JwtTokenService

__all__ = ["PasslibPasswordHasher", "JwtTokenService"]
