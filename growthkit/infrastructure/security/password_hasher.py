"""
Password hashing on passlib.

Hashes use the pbkdf2_sha256 scheme in passlib's modular crypt format:
$pbkdf2-sha256$<rounds>$<salt>$<checksum>
"""

from passlib.context import CryptContext
from growthkit.config.settings import Config
from growthkit.domain.ports.security import PasswordHasher


class PasslibPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = Config.PASSWORD_HASH_ROUNDS):
        self._context = CryptContext(
            schemes=["pbkdf2_sha256"],
            deprecated="auto",
            pbkdf2_sha256__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        if not isinstance(password, str) or not password_hash:
            return False
        try:
            return self._context.verify(password, password_hash)
        except ValueError:
            # Unknown or malformed hash
            return False
