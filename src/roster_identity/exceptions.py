"""Authentication exceptions.

These exceptions are raised by the roster_identity services and should be
caught and handled by the calling transport layer.
"""

from roster_identity.domain.shared.exceptions import (
    ErrorCode,
    UnauthorizedError,
    ValidationError,
)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class InvalidCredentialsError(UnauthorizedError):
    """Raised when username or password is incorrect during login.

    The message is the same for an unknown username and a wrong password.
    """

    def __init__(self, message: str = INVALID_CREDENTIALS_MESSAGE):
        super().__init__(message, code=ErrorCode.INVALID_CREDENTIALS)


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, code=ErrorCode.WEAK_PASSWORD)
