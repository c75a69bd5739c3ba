"""End-to-end user journeys through UserService and the SQL repository."""

import pytest

from roster_identity.application.dtos import UserRegistrationDTO, UserUpdateDTO
from roster_identity.application.services import UserService
from roster_identity.domain.user import (
    User,
    UsernameAlreadyExistsError,
    UserNotFound,
    UserNotFoundError,
)
from roster_identity.exceptions import InvalidCredentialsError, WeakPasswordError
from roster_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)
from roster_identity.infrastructure.security import BcryptPasswordHasher


class _StaleLookupRepository(UserRepositorySQLAlchemy):
    """Repository whose username lookups never see other users.

    Reproduces the window between the service's pre-check and the insert
    when two registrations race.
    """

    async def get_by_username(self, username: str):
        return UserNotFound(username)


class TestRegistrationAndLogin:
    """Register, then authenticate."""

    @pytest.mark.asyncio
    async def test_register_then_authenticate(self, user_service):
        await user_service.register_user(
            UserRegistrationDTO(username="alice", email="a@x.com", password="Secret1!"),
        )

        user = await user_service.authenticate_user("alice", "Secret1!")

        assert user.name.value == "alice"
        assert user.email == "a@x.com"

        with pytest.raises(InvalidCredentialsError):
            await user_service.authenticate_user("alice", "wrong")

    @pytest.mark.asyncio
    async def test_failures_are_indistinguishable(self, user_service):
        await user_service.register_user(
            UserRegistrationDTO("realuser", "r@x.com", "Secret1!"),
        )

        with pytest.raises(InvalidCredentialsError) as unknown:
            await user_service.authenticate_user("nosuchuser", "anything")
        with pytest.raises(InvalidCredentialsError) as wrong:
            await user_service.authenticate_user("realuser", "wrongpassword")

        assert str(unknown.value) == str(wrong.value)

    @pytest.mark.asyncio
    async def test_password_is_never_stored_in_plaintext(self, user_service, user_repo):
        user = await user_service.register_user(
            UserRegistrationDTO("alice", "a@x.com", "Secret1!"),
        )

        stored = await user_repo.get_by_id(user.id)

        assert stored.password_hash is not None
        assert stored.password_hash != "Secret1!"
        assert stored.password_hash.startswith("$2b$04$")

    @pytest.mark.asyncio
    async def test_weak_password_registers_nothing(self, user_service, user_repo):
        with pytest.raises(WeakPasswordError):
            await user_service.register_user(
                UserRegistrationDTO("alice", "a@x.com", "short"),
            )

        assert await user_repo.count() == 0

    @pytest.mark.asyncio
    async def test_login_upgrades_outdated_hash(self, user_repo):
        old_service = UserService(user_repo, BcryptPasswordHasher(rounds=4))
        await old_service.register_user(
            UserRegistrationDTO("alice", "a@x.com", "Secret1!"),
        )

        new_service = UserService(user_repo, BcryptPasswordHasher(rounds=5))
        user = await new_service.authenticate_user("alice", "Secret1!")

        assert user.password_hash.startswith("$2b$05$")
        stored = await user_repo.get_by_id(user.id)
        assert stored.password_hash == user.password_hash


class TestUniqueness:
    """Duplicate usernames, via the pre-check or the storage guard."""

    @pytest.mark.asyncio
    async def test_second_registration_with_same_name_conflicts(self, user_service):
        await user_service.register_user(
            UserRegistrationDTO("alice", "a@x.com", "Secret1!"),
        )

        with pytest.raises(UsernameAlreadyExistsError):
            await user_service.register_user(
                UserRegistrationDTO("alice", "other@x.com", "Secret2!"),
            )

    @pytest.mark.asyncio
    async def test_storage_guard_catches_race(self, db_session, password_hasher):
        """A stale pre-check still ends in a conflict, not a storage error."""
        service = UserService(_StaleLookupRepository(db_session), password_hasher)
        await service.register_user(UserRegistrationDTO("alice", "a@x.com", "Secret1!"))

        with pytest.raises(UsernameAlreadyExistsError):
            await service.register_user(
                UserRegistrationDTO("alice", "other@x.com", "Secret2!"),
            )

        assert len(await service.list_users()) == 1

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_conflicts(self, user_service):
        await user_service.register_user(UserRegistrationDTO("alice", "a@x.com", "Secret1!"))
        bob = await user_service.register_user(
            UserRegistrationDTO("bob", "b@x.com", "Secret1!"),
        )

        with pytest.raises(UsernameAlreadyExistsError):
            await user_service.update_user(bob.id, UserUpdateDTO(name="alice"))

        assert (await user_service.get_user_by_id(bob.id)).username == "bob"


class TestProfileAndDeletion:
    """Updates and soft deletion."""

    @pytest.mark.asyncio
    async def test_partial_update(self, user_service):
        user = await user_service.register_user(
            UserRegistrationDTO("alice", "a@x.com", "Secret1!"),
        )

        updated = await user_service.update_user(user.id, UserUpdateDTO(email="new@x.com"))
        assert updated.username == "alice"
        assert updated.email == "new@x.com"

        renamed = await user_service.update_user(str(user.id), UserUpdateDTO(name="alice b"))
        assert renamed.username == "alice b"
        assert renamed.email == "new@x.com"

        result = await user_service.get_user_by_username("alice b")
        assert result.user_or_none() == user

    @pytest.mark.asyncio
    async def test_delete_is_soft(self, user_service):
        user = await user_service.register_user(
            UserRegistrationDTO("alice", "a@x.com", "Secret1!"),
        )

        deleted = await user_service.delete_user(user.id)

        assert isinstance(deleted, User)
        assert deleted.is_deleted is True
        assert (await user_service.get_user_by_id(user.id)).is_deleted is True
        assert isinstance(await user_service.get_user_by_username("alice"), UserNotFound)

        # Deleted users cannot log in
        with pytest.raises(InvalidCredentialsError):
            await user_service.authenticate_user("alice", "Secret1!")

    @pytest.mark.asyncio
    async def test_delete_unknown_user(self, user_service, user_repo):
        from ulid import ULID

        await user_service.register_user(UserRegistrationDTO("alice", "a@x.com", "Secret1!"))

        with pytest.raises(UserNotFoundError):
            await user_service.delete_user(ULID())

        assert await user_repo.count() == 1

    @pytest.mark.asyncio
    async def test_change_password(self, user_service):
        user = await user_service.register_user(
            UserRegistrationDTO("alice", "a@x.com", "Secret1!"),
        )

        await user_service.change_password(user.id, "Secret1!", "NewSecret2!")

        with pytest.raises(InvalidCredentialsError):
            await user_service.authenticate_user("alice", "Secret1!")
        assert (await user_service.authenticate_user("alice", "NewSecret2!")).id == user.id
