"""SQLAlchemy models for the identity domain."""

from roster_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = ["UserModel"]
