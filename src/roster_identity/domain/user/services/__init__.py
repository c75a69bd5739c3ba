from roster_identity.domain.user.services.password_hasher import (
    PasswordHasher,
    PasswordVerificationResult,
)

__all__ = [
    "PasswordHasher",
    "PasswordVerificationResult",
]
