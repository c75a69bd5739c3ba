"""SQLAlchemy persistence for the identity domain.

Provides:
- Base: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation
- Engine/session helpers and create_tables/drop_tables
"""

from roster_identity.infrastructure.persistence.sqlalchemy.base import Base
from roster_identity.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)
from roster_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from roster_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
]
