"""User identifiers.

Users are keyed by ULIDs: 128-bit, globally unique and sortable by
creation time. The nil ULID is the "no id" sentinel.
"""

from typing import Union
from uuid import UUID

from ulid import ULID

from roster_identity.domain.user.exceptions import InvalidUserIdError

EMPTY_USER_ID = ULID.from_bytes(bytes(16))


def new_user_id() -> ULID:
    return ULID()


def is_empty_user_id(user_id: ULID | None) -> bool:
    return user_id is None or user_id == EMPTY_USER_ID


def parse_user_id(value: Union[ULID, UUID, str, None]) -> ULID:
    """Coerce a ULID, UUID or ULID string into a ULID.

    Raises
    ------
    InvalidUserIdError
        If the value is missing or not a valid identifier
    """
    if isinstance(value, ULID):
        return value
    if isinstance(value, UUID):
        return ULID.from_uuid(value)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidUserIdError
    if isinstance(value, str):
        try:
            return ULID.from_str(value.strip())
        except ValueError as e:
            msg = f"Invalid user ID: {value}"
            raise InvalidUserIdError(msg) from e
    msg = f"Invalid user ID: {value!r}"
    raise InvalidUserIdError(msg)
