"""Building blocks shared across the identity domain."""

from roster_identity.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    UnauthorizedError,
    ValidationError,
)
from roster_identity.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "UnauthorizedError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
