"""Password hashing (argon2id, memory-hard).

Each hash embeds its own parameters and a fresh random salt in PHC format
($argon2id$v=19$m=...,t=...,p=...$salt$digest), so cost settings can be
raised later without invalidating stored hashes; needs_rehash() reports
hashes made with outdated parameters.
"""

from argon2 import PasswordHasher as _Argon2
from argon2 import Type
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError


class Argon2PasswordHasher:
    """Hash and verify passwords with argon2id at configurable memory and time cost."""

    def __init__(
        self,
        memory_cost: int,
        iterations: int,
        parallelism: int = 4,
    ) -> None:
        """Initialize with cost parameters.

        Args:
            memory_cost: Memory in KiB (must be >= 8 * parallelism).
            iterations: Number of passes over memory (time cost, >= 1).
            parallelism: Number of lanes.
        """
        self._hasher = _Argon2(
            time_cost=iterations,
            memory_cost=memory_cost,
            parallelism=parallelism,
            type=Type.ID,
        )

    def hash(self, password: str) -> str:
        """Return an encoded argon2id hash of password with a new random salt.

        Raises:
            ValueError: If password is empty.
        """
        if not password:
            raise ValueError("Password must not be empty")
        return self._hasher.hash(password)

    def verify(self, password: str, encoded_hash: str) -> bool:
        """Return True if password matches encoded_hash.

        Comparison is constant-time. Never raises: malformed, unparseable or
        non-string hashes simply fail verification.
        """
        if not isinstance(password, str) or not isinstance(encoded_hash, str):
            return False
        try:
            return self._hasher.verify(encoded_hash, password)
        except (VerifyMismatchError, VerificationError, InvalidHashError, ValueError, TypeError):
            return False

    def needs_rehash(self, encoded_hash: str) -> bool:
        """Return True if encoded_hash was made with different parameters than configured."""
        try:
            return self._hasher.check_needs_rehash(encoded_hash)
        except (InvalidHashError, ValueError):
            return True


def build_password_hasher(settings) -> Argon2PasswordHasher:
    """Build the hasher from settings (memory cost, iterations, parallelism)."""
    return Argon2PasswordHasher(
        memory_cost=settings.hasher_memory_cost,
        iterations=settings.hasher_iterations,
        parallelism=settings.hasher_parallelism,
    )
