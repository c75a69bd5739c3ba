"""
Database fixtures for roster_identity integration tests.

Uses an in-memory SQLite database by default. Set TEST_DATABASE_URL to an
asyncpg URL to run the same tests against PostgreSQL. Each test gets a
freshly created schema that is dropped again afterwards.
"""

import os

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from roster_identity.application.services import UserService
from roster_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
    create_tables,
    drop_tables,
)

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", SQLITE_MEMORY_URL)


@pytest_asyncio.fixture
async def async_engine():
    """
    Create an async engine with a clean schema for one test.

    SQLite in-memory databases live per connection, so a StaticPool keeps
    every session on the same one.
    """
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_async_engine(
            TEST_DATABASE_URL,
            echo=False,
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(
            TEST_DATABASE_URL,
            echo=False,
            poolclass=NullPool,  # Avoid connection pool issues in tests
        )

    await drop_tables(engine)
    await create_tables(engine)

    yield engine

    await drop_tables(engine)
    await engine.dispose()


@pytest.fixture
def session_maker(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def db_session(session_maker):
    """Provide a database session for one test."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def user_repo(db_session) -> UserRepositorySQLAlchemy:
    """Create UserRepository instance with the test session."""
    return UserRepositorySQLAlchemy(db_session)


@pytest.fixture
def user_service(user_repo, password_hasher) -> UserService:
    """UserService wired to the real repository and a fast bcrypt hasher."""
    return UserService(user_repository=user_repo, password_hasher=password_hasher)
