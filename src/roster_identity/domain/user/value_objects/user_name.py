"""UserName value object.

Display name of a user; also the login handle, unique across users.
"""

from dataclasses import dataclass

from roster_identity.domain.user.exceptions import InvalidUserNameError

MIN_LENGTH = 3
MAX_LENGTH = 50


def _is_allowed(char: str) -> bool:
    return char.isalpha() or char.isdecimal() or char.isspace()


@dataclass(frozen=True)
class UserName:
    """Value object representing a validated user name."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            msg = "Name cannot be null or empty."
            raise InvalidUserNameError(msg)

        if len(self.value) > MAX_LENGTH:
            msg = f"Name cannot be longer than {MAX_LENGTH} characters."
            raise InvalidUserNameError(msg)

        if len(self.value) < MIN_LENGTH:
            msg = f"Name cannot be shorter than {MIN_LENGTH} characters."
            raise InvalidUserNameError(msg)

        if not all(_is_allowed(c) for c in self.value):
            msg = "Name can only contain letters, numbers, and spaces."
            raise InvalidUserNameError(msg)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"UserName('{self.value}')"
