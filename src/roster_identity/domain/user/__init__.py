"""User domain manages user identity only.

This domain handles:
- User aggregate (id, name, email, password hash, lifecycle flags)
- UserName value object and ULID identifiers
- Repository and password hasher interfaces
"""

from roster_identity.domain.user.aggregates import User
from roster_identity.domain.user.exceptions import (
    InvalidEmailError,
    InvalidUserIdError,
    InvalidUserNameError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
)
from roster_identity.domain.user.lookup import (
    UserFound,
    UserLookupResult,
    UserNotFound,
)
from roster_identity.domain.user.repositories import UserRepository
from roster_identity.domain.user.services import (
    PasswordHasher,
    PasswordVerificationResult,
)
from roster_identity.domain.user.value_objects import (
    EMPTY_USER_ID,
    UserName,
    is_empty_user_id,
    new_user_id,
    parse_user_id,
)

__all__ = [
    "EMPTY_USER_ID",
    "InvalidEmailError",
    "InvalidUserIdError",
    "InvalidUserNameError",
    "PasswordHasher",
    "PasswordVerificationResult",
    "User",
    "UserFound",
    "UserLookupResult",
    "UserName",
    "UserNotFound",
    "UserNotFoundError",
    "UserRepository",
    "UsernameAlreadyExistsError",
    "is_empty_user_id",
    "new_user_id",
    "parse_user_id",
]
