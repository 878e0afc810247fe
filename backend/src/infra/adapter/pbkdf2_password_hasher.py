import hashlib
import secrets
from functools import lru_cache

from core.port.password_hasher import PasswordHasher
from infra.config.config import get_config

HASH_ALGORITHM = "sha512"
DERIVED_KEY_LENGTH = 64
SALT_LENGTH = 32


class Pbkdf2PasswordHasher(PasswordHasher):
    """PBKDF2-HMAC-SHA512 hashes stored as ``<salt hex>:<derived key hex>``."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations

    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(SALT_LENGTH)
        derived_key = hashlib.pbkdf2_hmac(
            HASH_ALGORITHM,
            password.encode("utf-8"),
            salt,
            self.iterations,
            dklen=DERIVED_KEY_LENGTH,
        )

        return f"{salt.hex()}:{derived_key.hex()}"


@lru_cache
def get_password_hasher() -> PasswordHasher:
    config = get_config()

    return Pbkdf2PasswordHasher(iterations=config.SECURITY_CONFIG.PASSWORD_HASH_ITERATIONS)
