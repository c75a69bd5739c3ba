"""Password hasher interface for the user domain."""

import secrets
from abc import ABC, abstractmethod
from enum import Enum


class PasswordVerificationResult(str, Enum):
    """Outcome of checking a plaintext password against a stored hash."""

    FAILED = "failed"
    SUCCESS = "success"
    SUCCESS_REHASH_NEEDED = "success_rehash_needed"

    @property
    def succeeded(self) -> bool:
        return self is not PasswordVerificationResult.FAILED


class PasswordHasher(ABC):
    """Domain service interface for one-way password hashing.

    The produced hash is opaque to the domain: the User aggregate stores
    it and hands it back for verification, nothing more.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password

        Returns
        -------
        Salted one-way hash, encoded as a string

        Raises
        ------
        WeakPasswordError
            If the password does not meet the hasher's requirements
        """

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> PasswordVerificationResult:
        """
        Verify a plaintext password against a stored hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The stored hash

        Returns
        -------
        FAILED on mismatch or unreadable hash, SUCCESS on match,
        SUCCESS_REHASH_NEEDED on a match made with outdated parameters
        """

    def dummy_hash(self) -> str:
        """
        Hash of a random throwaway password, made once per hasher.

        Verifying against it costs the same as verifying a real hash, so a
        login for an unknown user takes as long as a wrong password.
        """
        cached = getattr(self, "_dummy_hash", None)
        if cached is None:
            cached = self.hash(secrets.token_urlsafe(32))
            self._dummy_hash = cached
        return cached
