"""Result of looking a user up by name.

A missing user is an ordinary outcome of a username lookup (registration
and rename checks expect it), so it is returned rather than raised.

Examples
--------
>>> result = await repository.get_by_username("alice")
>>> if isinstance(result, UserFound):
...     print(result.user.id)
"""

from dataclasses import dataclass
from typing import Union

from roster_identity.domain.user.aggregates.user import User


@dataclass(frozen=True)
class UserFound:
    """A non-deleted user holds the requested name."""

    user: User

    @property
    def is_found(self) -> bool:
        return True

    def user_or_none(self) -> User | None:
        return self.user


@dataclass(frozen=True)
class UserNotFound:
    """No non-deleted user holds the requested name."""

    username: str

    @property
    def is_found(self) -> bool:
        return False

    def user_or_none(self) -> User | None:
        return None


UserLookupResult = Union[UserFound, UserNotFound]
