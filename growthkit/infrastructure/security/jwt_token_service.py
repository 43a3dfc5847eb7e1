"""
JWT bearer tokens (HS256).

Claims: sub and email carry the user email; iat, exp, iss and aud are required
on decode.
"""

import time
import jwt
from growthkit.config.settings import Config
from growthkit.domain.exceptions import AuthenticationError
from growthkit.domain.ports.security import TokenService
from growthkit.domain.value_objects.user_email import UserEmail

ALGORITHM = "HS256"


class JwtTokenService(TokenService):
    def __init__(
        self,
        secret: str = Config.SERVICE_AUTH_SECRET,
        issuer: str = Config.SERVICE_AUTH_ISSUER,
        audience: str = Config.SERVICE_AUTH_AUDIENCE,
        ttl_seconds: int = Config.TOKEN_TTL_SECONDS,
    ):
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._ttl_seconds = ttl_seconds

    def issue(self, email: UserEmail) -> str:
        now = int(time.time())
        payload = {
            "sub": email.value,
            "email": email.value,
            "iat": now,
            "exp": now + self._ttl_seconds,
            "iss": self._issuer,
            "aud": self._audience,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> UserEmail:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "aud", "iss"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {str(e)}")

        email = claims.get("email")
        if not email:
            raise AuthenticationError("Missing required claims in token")
        try:
            return UserEmail(email)
        except ValueError:
            raise AuthenticationError("Invalid token claims")
