"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from roster_identity.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidUserNameError(ValidationError):
    """Raised when a user name breaks the UserName rules."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_USERNAME)


class InvalidEmailError(ValidationError):
    """Raised when email is missing or blank."""

    def __init__(self, message: str = "Email cannot be null or empty.") -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class InvalidUserIdError(ValidationError):
    """Raised when a user id is empty or cannot be parsed."""

    def __init__(self, message: str = "User ID cannot be empty.") -> None:
        super().__init__(message, code=ErrorCode.INVALID_USER_ID)


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            f"User with ID {user_id} not found.",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class UsernameAlreadyExistsError(ConflictError):
    """Username already registered."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            "Username already exists",
            code=ErrorCode.USERNAME_ALREADY_EXISTS,
            details={"username": username},
        )
