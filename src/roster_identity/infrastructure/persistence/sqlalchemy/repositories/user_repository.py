"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from ulid import ULID

from roster_identity.domain.shared.exceptions import ValidationError
from roster_identity.domain.shared.time import ensure_tz_aware
from roster_identity.domain.user import (
    InvalidUserIdError,
    User,
    UserFound,
    UserLookupResult,
    UsernameAlreadyExistsError,
    UserNotFound,
    UserNotFoundError,
    UserRepository,
    is_empty_user_id,
)
from roster_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# SQLite names the column, PostgreSQL names the unique index
_USERNAME_VIOLATION_MARKERS = ("users.name", "ix_users_name")


def _is_username_violation(error: IntegrityError) -> bool:
    message = str(error)
    return any(marker in message for marker in _USERNAME_VIOLATION_MARKERS)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Every write commits on its own, so a rejected insert or rename only
    rolls back itself.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: ULID) -> User:
        if is_empty_user_id(user_id):
            raise UserNotFoundError(str(user_id))

        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(str(user_id))

        return self._map_to_domain(model)

    async def get_by_username(self, username: str) -> UserLookupResult:
        if not isinstance(username, str) or not username.strip():
            msg = "Username cannot be null or empty."
            raise ValidationError(msg)

        stmt = select(UserModel).where(
            UserModel.name == username,
            UserModel.is_deleted.is_(False),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return UserNotFound(username)

        return UserFound(self._map_to_domain(model))

    async def register(self, user: User) -> User:
        if user is None:
            msg = "User cannot be null."
            raise ValidationError(msg)

        self._session.add(self._map_to_model(user))
        await self._commit(user)

        logger.info("Registered user: %s (name: %s)", user.id, user.username)
        return user

    async def update(self, user: User) -> User:
        if user is None:
            msg = "User cannot be null."
            raise ValidationError(msg)

        model = await self._find_model_by_id(user.id)
        if model is None:
            raise UserNotFoundError(str(user.id))

        self._update_model(model, user)
        await self._commit(user)
        await self._session.refresh(model)

        logger.debug("Updated user: %s", user.id)
        return self._map_to_domain(model)

    async def delete(self, user_id: ULID) -> User:
        if is_empty_user_id(user_id):
            raise InvalidUserIdError

        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(str(user_id))

        user = self._map_to_domain(model)
        user.mark_deleted()
        self._update_model(model, user)
        await self._commit(user)
        await self._session.refresh(model)

        logger.info("Soft-deleted user: %s", user_id)
        return self._map_to_domain(model)

    async def count(self, include_deleted: bool = False) -> int:
        stmt = select(func.count()).select_from(UserModel)
        if not include_deleted:
            stmt = stmt.where(UserModel.is_deleted.is_(False))
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_all(self, include_deleted: bool = False) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.id)
        if not include_deleted:
            stmt = stmt.where(UserModel.is_deleted.is_(False))
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def _commit(self, user: User) -> None:
        try:
            await self._session.flush()
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            if _is_username_violation(e):
                logger.warning(
                    "Storage rejected duplicate username: %s",
                    user.username,
                )
                raise UsernameAlreadyExistsError(user.username) from e
            raise

    async def _find_model_by_id(self, user_id: ULID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id.to_uuid())
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=ULID.from_uuid(model.id),
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            is_active=model.is_active,
            is_deleted=model.is_deleted,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id.to_uuid(),
            name=user.username,
            email=user.email,
            password_hash=user.password_hash,
            is_active=user.is_active,
            is_deleted=user.is_deleted,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.username
        model.email = user.email
        model.password_hash = user.password_hash
        model.is_active = user.is_active
        model.is_deleted = user.is_deleted
        model.updated_at = user.updated_at
