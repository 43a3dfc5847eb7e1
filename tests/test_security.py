import time
import jwt
import pytest
from growthkit.domain.exceptions import AuthenticationError
from growthkit.domain.value_objects import UserEmail
from growthkit.infrastructure.security import JwtTokenService, PasslibPasswordHasher


class TestPasswordHasher:
    def test_verify(self):
        hasher = PasslibPasswordHasher(rounds=1000)
        stored = hasher.hash("secret123")

        assert stored.startswith("$pbkdf2-sha256$1000$")
        assert "secret123" not in stored
        assert hasher.verify("secret123", stored)
        assert not hasher.verify("secret124", stored)

    def test_salted(self):
        hasher = PasslibPasswordHasher(rounds=1000)
        assert hasher.hash("secret123") != hasher.hash("secret123")

    def test_hash_from_other_rounds_still_verifies(self):
        stored = PasslibPasswordHasher(rounds=2000).hash("secret123")
        assert PasslibPasswordHasher(rounds=1000).verify("secret123", stored)

    @pytest.mark.parametrize("stored", ["", "hashed_secret123", "md5$1$aa$bb", "$pbkdf2-sha256$x$aa$bb"])
    def test_malformed_hash_never_verifies(self, stored):
        assert not PasslibPasswordHasher(rounds=1000).verify("secret123", stored)


class TestJwtTokenService:
    def test_round_trip(self):
        service = JwtTokenService(secret="s", issuer="i", audience="a")
        token = service.issue(UserEmail("member@example.com"))
        assert service.decode(token) == UserEmail("member@example.com")

    def test_wrong_secret(self):
        token = JwtTokenService(secret="s1", issuer="i", audience="a").issue(
            UserEmail("member@example.com")
        )
        with pytest.raises(AuthenticationError, match="Invalid token"):
            JwtTokenService(secret="s2", issuer="i", audience="a").decode(token)

    def test_expired(self):
        now = int(time.time())
        token = jwt.encode(
            {
                "sub": "member@example.com",
                "email": "member@example.com",
                "iat": now - 100,
                "exp": now - 10,
                "iss": "i",
                "aud": "a",
            },
            "s",
            algorithm="HS256",
        )
        with pytest.raises(AuthenticationError, match="Token has expired"):
            JwtTokenService(secret="s", issuer="i", audience="a").decode(token)

    def test_wrong_audience(self):
        token = JwtTokenService(secret="s", issuer="i", audience="other").issue(
            UserEmail("member@example.com")
        )
        with pytest.raises(AuthenticationError):
            JwtTokenService(secret="s", issuer="i", audience="a").decode(token)
