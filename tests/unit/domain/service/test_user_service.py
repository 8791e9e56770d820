"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from forum.domain.error import ConflictError, NotFoundError, ValidationError
from forum.domain.repository import UserRepository
from forum.domain.service import UserService
from forum.domain.value import UserIcon, UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSignUp:
    """Tests for sign_up."""

    @pytest.mark.asyncio
    async def test_sign_up_stores_hashed_password(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await user_service.sign_up("alice", "password1")

        # Assert
        saved = await user_repo.find_by_username(Username("alice"))
        assert saved is not None
        assert saved.id == user.id
        assert saved.password_hash != "password1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,password", [("", "password1"), ("alice", ""), (None, None)]
    )
    async def test_missing_field_rejected(self, unit_env, username, password):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match="missing username or password"):
            await user_service.sign_up(username, password)

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.sign_up("alice", "password1")

        with pytest.raises(ConflictError, match="username taken"):
            await user_service.sign_up("alice", "other-password")

    @pytest.mark.asyncio
    async def test_overlong_username_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match="at most 30 characters"):
            await user_service.sign_up("x" * 31, "password1")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["John Doe", "émile", "Jo", "x" * 30])
    async def test_free_form_username_accepted(self, unit_env, username):
        user_service = await unit_env.get(UserService)

        user = await user_service.sign_up(f"  {username} ", "password1")

        assert user.username == Username(username)
        assert (await user_service.check_credentials(username, "password1")).id == user.id

    @pytest.mark.asyncio
    async def test_overlong_password_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match="72 bytes"):
            await user_service.sign_up("alice", "x" * 73)


class TestCheckCredentials:
    """Tests for check_credentials."""

    @pytest.mark.asyncio
    async def test_correct_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        created = await user_service.sign_up("alice", "password1")

        user = await user_service.check_credentials("alice", "password1")

        assert user.id == created.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,password", [("alice", "wrong"), ("nobody", "password1")]
    )
    async def test_wrong_credentials_share_one_message(
        self, unit_env, username, password
    ):
        user_service = await unit_env.get(UserService)
        await user_service.sign_up("alice", "password1")

        with pytest.raises(ValidationError, match="wrong username or password"):
            await user_service.check_credentials(username, password)


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_change_username_and_icon(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.sign_up("alice", "password1")

        updated = await user_service.update_profile(
            user.id, username="alice2", icon=UserIcon.OWL
        )

        assert updated.username == Username("alice2")
        assert updated.icon is UserIcon.OWL
        # Credentials still work under the new name
        assert (await user_service.check_credentials("alice2", "password1")).id == user.id

    @pytest.mark.asyncio
    async def test_username_of_another_user_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.sign_up("alice", "password1")
        bob = await user_service.sign_up("bob", "password1")

        with pytest.raises(ConflictError):
            await user_service.update_profile(bob.id, username="alice")

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.update_profile(UserId(uuid4()), icon=UserIcon.CAT)

    @pytest.mark.asyncio
    async def test_blank_username_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.sign_up("alice", "password1")

        with pytest.raises(ValidationError, match="username is required"):
            await user_service.update_profile(user.id, username="   ")
