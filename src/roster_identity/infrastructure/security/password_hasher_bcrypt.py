"""Password hashing using bcrypt.

Provides secure password hashing and verification with configurable
work factor and strength validation.
"""

import bcrypt

from roster_config.settings import Settings, get_settings
from roster_identity.domain.user.services import (
    PasswordHasher,
    PasswordVerificationResult,
)
from roster_identity.exceptions import WeakPasswordError


class BcryptPasswordHasher(PasswordHasher):
    """Bcrypt implementation of the PasswordHasher interface.

    Examples
    --------
    >>> hasher = BcryptPasswordHasher(rounds=4)
    >>> hashed = hasher.hash("my_secure_password")
    >>> hasher.verify("my_secure_password", hashed)
    <PasswordVerificationResult.SUCCESS: 'success'>
    >>> hasher.verify("wrong_password", hashed)
    <PasswordVerificationResult.FAILED: 'failed'>
    """

    # Password requirements
    MIN_LENGTH = 8
    # bcrypt only reads the first 72 bytes of input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the password hasher.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Hashes made with a different factor still verify, but are
            reported as SUCCESS_REHASH_NEEDED.
        """
        self._rounds = rounds

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "BcryptPasswordHasher":
        """Create a hasher with the configured ``password_hash_rounds``."""
        settings = settings or get_settings()
        return cls(rounds=settings.password_hash_rounds)

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> PasswordVerificationResult:
        if not password or not password_hash:
            return PasswordVerificationResult.FAILED

        try:
            matches = bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return PasswordVerificationResult.FAILED

        if not matches:
            return PasswordVerificationResult.FAILED
        if self.needs_rehash(password_hash):
            return PasswordVerificationResult.SUCCESS_REHASH_NEEDED
        return PasswordVerificationResult.SUCCESS

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Minimum 8 characters
        - Maximum 72 bytes once UTF-8 encoded

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check whether a hash was made with a different work factor.

        Bcrypt hashes look like ``$2b$12$<salt+digest>``; the second field
        is the work factor.
        """
        try:
            parts = password_hash.split("$")
            if len(parts) >= 3:
                return int(parts[2]) != self._rounds
        except (ValueError, IndexError):
            pass
        return True
