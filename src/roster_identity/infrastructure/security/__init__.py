from roster_identity.infrastructure.security.password_hasher_bcrypt import (
    BcryptPasswordHasher,
)

__all__ = ["BcryptPasswordHasher"]
