"""User repository interface."""

from abc import ABC, abstractmethod

from ulid import ULID

from roster_identity.domain.user.aggregates.user import User
from roster_identity.domain.user.lookup import UserLookupResult


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations must back username uniqueness with a storage-level
    constraint and report a violation as UsernameAlreadyExistsError.
    """

    @abstractmethod
    async def get_by_id(self, user_id: ULID) -> User:
        """Get a user by ID, deleted or not.

        Raises
        ------
        UserNotFoundError
            If the id is the empty sentinel or no user has it
        """

    @abstractmethod
    async def get_by_username(self, username: str) -> UserLookupResult:
        """Find the non-deleted user holding a name.

        Raises
        ------
        ValidationError
            If username is blank
        """

    @abstractmethod
    async def register(self, user: User) -> User:
        """Insert a new user.

        Raises
        ------
        ValidationError
            If user is None
        UsernameAlreadyExistsError
            If the storage uniqueness constraint rejects the insert
        """

    @abstractmethod
    async def update(self, user: User) -> User:
        """Overwrite the stored user's mutable fields.

        Raises
        ------
        ValidationError
            If user is None
        UserNotFoundError
            If no stored user has this id
        UsernameAlreadyExistsError
            If the new name collides with another user
        """

    @abstractmethod
    async def delete(self, user_id: ULID) -> User:
        """Soft-delete a user and return the updated user.

        Raises
        ------
        ValidationError
            If the id is the empty sentinel
        UserNotFoundError
            If no stored user has this id
        """

    @abstractmethod
    async def count(self, include_deleted: bool = False) -> int:
        """Count users."""

    @abstractmethod
    async def list_all(self, include_deleted: bool = False) -> list[User]:
        """List users in creation order."""
