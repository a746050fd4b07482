"""Password hashing utilities using argon2."""

from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from recipebox.core.exceptions import InvalidInputError


class PasswordService:
    """Password hashing and verification using Argon2id.

    Argon2id is the recommended algorithm for password hashing,
    combining resistance to both side-channel and GPU attacks.
    Every hash embeds its own random salt and cost parameters.
    """

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,  # 64 MiB
        parallelism: int = 4,
    ) -> None:
        """Initialize password hasher.

        Args:
            time_cost: Number of iterations.
            memory_cost: Memory usage in KiB.
            parallelism: Number of parallel threads.
        """
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )

    def hash(self, password: str) -> str:
        """Hash a password.

        Args:
            password: Plain text password.

        Returns:
            Argon2 hash string.

        Raises:
            InvalidInputError: If password is not a string.
        """
        if not isinstance(password, str):
            raise InvalidInputError("Password must be a string")
        return self._hasher.hash(password)

    def verify(self, hash: str, password: str) -> bool:
        """Verify a password against a hash.

        Never raises on mismatch or on a corrupt stored hash.

        Args:
            hash: Argon2 hash string.
            password: Plain text password to verify.

        Returns:
            True if password matches, False otherwise.
        """
        if not isinstance(hash, str) or not isinstance(password, str):
            return False
        try:
            return self._hasher.verify(hash, password)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, hash: str) -> bool:
        """Check if a hash was made with different cost parameters.

        Args:
            hash: Existing hash to check.

        Returns:
            True if hash should be rehashed with current parameters.
        """
        return self._hasher.check_needs_rehash(hash)
