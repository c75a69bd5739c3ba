"""User identity storage and authentication.

Provides:
- User aggregate with the UserName value object
- UserService for registration, updates, soft deletion and login
- BcryptPasswordHasher and the SQLAlchemy user repository

Examples
--------
>>> session_maker = create_session_maker(create_engine())
>>> async with session_maker() as session:
...     service = UserService(
...         user_repository=UserRepositorySQLAlchemy(session),
...         password_hasher=BcryptPasswordHasher.from_settings(),
...     )
...     user = await service.register_user(
...         UserRegistrationDTO(username="alice", email="a@x.com", password="Secret1!")
...     )
"""

from roster_identity.application.dtos import (
    UserLoginDTO,
    UserRegistrationDTO,
    UserUpdateDTO,
)
from roster_identity.application.services import UserService
from roster_identity.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    UnauthorizedError,
    ValidationError,
)
from roster_identity.domain.user import (
    EMPTY_USER_ID,
    User,
    UserFound,
    UserName,
    UsernameAlreadyExistsError,
    UserNotFound,
    UserNotFoundError,
)
from roster_identity.exceptions import InvalidCredentialsError, WeakPasswordError
from roster_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
    create_engine,
    create_session_maker,
    create_tables,
)
from roster_identity.infrastructure.security import BcryptPasswordHasher

__all__ = [
    "EMPTY_USER_ID",
    "BcryptPasswordHasher",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "InvalidCredentialsError",
    "UnauthorizedError",
    "User",
    "UserFound",
    "UserLoginDTO",
    "UserName",
    "UserNotFound",
    "UserNotFoundError",
    "UserRegistrationDTO",
    "UserRepositorySQLAlchemy",
    "UserService",
    "UserUpdateDTO",
    "UsernameAlreadyExistsError",
    "ValidationError",
    "WeakPasswordError",
    "create_engine",
    "create_session_maker",
    "create_tables",
]
