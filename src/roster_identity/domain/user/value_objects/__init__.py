"""Value objects for the user domain."""

from roster_identity.domain.user.value_objects.user_id import (
    EMPTY_USER_ID,
    is_empty_user_id,
    new_user_id,
    parse_user_id,
)
from roster_identity.domain.user.value_objects.user_name import UserName

__all__ = [
    "EMPTY_USER_ID",
    "UserName",
    "is_empty_user_id",
    "new_user_id",
    "parse_user_id",
]
