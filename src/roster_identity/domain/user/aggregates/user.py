"""User aggregate."""

from datetime import datetime
from typing import Union

from ulid import ULID

from roster_identity.domain.shared.exceptions import ValidationError
from roster_identity.domain.shared.time import utc_now
from roster_identity.domain.user.exceptions import InvalidEmailError
from roster_identity.domain.user.value_objects import UserName, new_user_id


def _require_email(email: str | None) -> str:
    if not isinstance(email, str) or not email.strip():
        raise InvalidEmailError
    return email


class User:
    """
    User aggregate root.

    Owns its UserName, email and password hash. Timestamps and flags only
    change through the named mutators; deletion is a soft delete flag, the
    aggregate itself is never destroyed.
    """

    def __init__(
        self,
        name: Union[str, UserName],
        email: str,
        password_hash: str | None = None,
        id: ULID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        is_active: bool = True,
        is_deleted: bool = False,
    ):
        if name is None:
            msg = "Name cannot be null."
            raise ValidationError(msg)

        now = utc_now()
        self._name = name if isinstance(name, UserName) else UserName(name)
        self._email = _require_email(email)
        self._password_hash = password_hash
        self._id = id or new_user_id()
        self._created_at = created_at or now
        self._updated_at = updated_at or self._created_at
        self._is_active = is_active
        self._is_deleted = is_deleted

    @property
    def id(self) -> ULID:
        return self._id

    @property
    def name(self) -> UserName:
        return self._name

    @property
    def username(self) -> str:
        return self._name.value

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str | None:
        return self._password_hash

    @property
    def has_password(self) -> bool:
        return self._password_hash is not None

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_deleted(self) -> bool:
        return self._is_deleted

    def update_name(self, name: Union[str, UserName]) -> None:
        if name is None:
            msg = "Name cannot be null."
            raise ValidationError(msg)

        self._name = name if isinstance(name, UserName) else UserName(name)
        self._touch()

    def update_email(self, email: str) -> None:
        self._email = _require_email(email)
        self._touch()

    def update_password(self, password_hash: str) -> None:
        """Store a hash produced by the password hasher."""
        if not isinstance(password_hash, str) or not password_hash.strip():
            msg = "Password cannot be null or empty."
            raise ValidationError(msg)

        self._password_hash = password_hash
        self._touch()

    def mark_deleted(self) -> None:
        self._is_deleted = True
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(cls, name: Union[str, UserName], email: str) -> "User":
        return cls(name=name, email=email)

    @classmethod
    def reconstitute(
        cls,
        id: ULID,
        name: Union[str, UserName],
        email: str,
        password_hash: str | None,
        created_at: datetime,
        updated_at: datetime,
        is_active: bool,
        is_deleted: bool,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
            is_active=is_active,
            is_deleted=is_deleted,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name.value}, email={self._email})"
