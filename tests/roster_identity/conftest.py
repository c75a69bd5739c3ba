"""
Pytest configuration for roster_identity tests.

Fixtures shared by unit and integration tests (users, hasher).
"""

import pytest

from roster_identity.domain.user import User
from roster_identity.infrastructure.security import BcryptPasswordHasher

TEST_USERNAME = "testuser"
TEST_EMAIL = "test@example.com"
TEST_PASSWORD = "Secret1!"


@pytest.fixture
def test_user() -> User:
    """Create a standard test user without a password."""
    return User.create(TEST_USERNAME, TEST_EMAIL)


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """Bcrypt hasher with the lowest work factor for fast tests."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def user_with_password(test_user, password_hasher) -> User:
    """Standard test user holding a hash of TEST_PASSWORD."""
    test_user.update_password(password_hasher.hash(TEST_PASSWORD))
    return test_user
