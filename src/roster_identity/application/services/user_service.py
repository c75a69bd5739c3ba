"""User service for registration, profile updates and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union
from uuid import UUID

from ulid import ULID

from roster_identity.domain.shared.exceptions import ValidationError
from roster_identity.domain.user import (
    InvalidUserIdError,
    PasswordVerificationResult,
    User,
    UserFound,
    UserLookupResult,
    UsernameAlreadyExistsError,
    is_empty_user_id,
    parse_user_id,
)
from roster_identity.exceptions import InvalidCredentialsError

if TYPE_CHECKING:
    from roster_identity.application.dtos import (
        UserLoginDTO,
        UserRegistrationDTO,
        UserUpdateDTO,
    )
    from roster_identity.domain.user import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)

UserIdLike = Union[ULID, UUID, str]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _require(value: str | None, field: str) -> None:
    if _is_blank(value):
        msg = f"{field} cannot be null or empty."
        raise ValidationError(msg, details={"field": field})


class UserService:
    """
    Application service for user accounts.

    Orchestrates the user repository and the password hasher:
    - Registration with a username uniqueness pre-check
    - Lookup by id and by username
    - Partial profile updates
    - Soft deletion
    - Authentication and password changes

    The uniqueness pre-checks give a fast, friendly error; the repository's
    unique constraint is what actually guarantees uniqueness, and its
    rejection surfaces as the same UsernameAlreadyExistsError.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
    ):
        self._user_repo = user_repository
        self._password_hasher = password_hasher

    async def get_user_by_id(self, user_id: UserIdLike) -> User:
        return await self._user_repo.get_by_id(parse_user_id(user_id))

    async def get_user_by_username(self, username: str) -> UserLookupResult:
        return await self._user_repo.get_by_username(username)

    async def list_users(self, include_deleted: bool = False) -> list[User]:
        return await self._user_repo.list_all(include_deleted=include_deleted)

    async def register_user(self, registration: UserRegistrationDTO) -> User:
        _require(registration.username, "Username")
        _require(registration.email, "Email")
        _require(registration.password, "Password")

        existing = await self._user_repo.get_by_username(registration.username)
        if isinstance(existing, UserFound):
            raise UsernameAlreadyExistsError(registration.username)

        user = User.create(registration.username, registration.email)
        user.update_password(self._password_hasher.hash(registration.password))

        registered = await self._user_repo.register(user)

        logger.info("User registered: %s (%s)", registered.username, registered.id)
        return registered

    async def update_user(self, user_id: UserIdLike, update: UserUpdateDTO) -> User:
        user_id = self._require_user_id(user_id)
        user = await self._user_repo.get_by_id(user_id)

        if not _is_blank(update.name) and update.name != user.username:
            existing = await self._user_repo.get_by_username(update.name)
            if isinstance(existing, UserFound) and existing.user.id != user.id:
                raise UsernameAlreadyExistsError(update.name)
            user.update_name(update.name)

        if not _is_blank(update.email):
            user.update_email(update.email)

        updated = await self._user_repo.update(user)

        logger.debug("User updated: %s", user_id)
        return updated

    async def delete_user(self, user_id: UserIdLike) -> User:
        """Soft-delete a user and return it with ``is_deleted`` set."""
        user_id = self._require_user_id(user_id)

        await self._user_repo.get_by_id(user_id)
        deleted = await self._user_repo.delete(user_id)

        logger.info("User deleted: %s", user_id)
        return deleted

    async def authenticate(self, login: UserLoginDTO) -> User:
        return await self.authenticate_user(login.username, login.password)

    async def authenticate_user(self, username: str, password: str) -> User:
        _require(username, "Username")
        _require(password, "Password")

        lookup = await self._user_repo.get_by_username(username)
        user = lookup.user_or_none()
        if user is None or user.password_hash is None:
            # Spend the same hashing time as a wrong password
            self._password_hasher.verify(password, self._password_hasher.dummy_hash())
            logger.warning("Failed login for username: %s", username)
            raise InvalidCredentialsError

        result = self._password_hasher.verify(password, user.password_hash)
        if result is PasswordVerificationResult.FAILED:
            logger.warning("Failed login for username: %s", username)
            raise InvalidCredentialsError

        if result is PasswordVerificationResult.SUCCESS_REHASH_NEEDED:
            user.update_password(self._password_hasher.hash(password))
            user = await self._user_repo.update(user)
            logger.info("Password hash upgraded for user: %s", user.id)

        logger.info("User authenticated: %s", user.id)
        return user

    async def change_password(
        self,
        user_id: UserIdLike,
        current_password: str,
        new_password: str,
    ) -> User:
        user_id = self._require_user_id(user_id)
        _require(current_password, "Current password")
        _require(new_password, "New password")

        user = await self._user_repo.get_by_id(user_id)
        if user.password_hash is None or not self._password_hasher.verify(
            current_password,
            user.password_hash,
        ).succeeded:
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        user.update_password(self._password_hasher.hash(new_password))
        updated = await self._user_repo.update(user)

        logger.info("Password changed for user: %s", user_id)
        return updated

    @staticmethod
    def _require_user_id(user_id: UserIdLike) -> ULID:
        parsed = parse_user_id(user_id)
        if is_empty_user_id(parsed):
            raise InvalidUserIdError
        return parsed
