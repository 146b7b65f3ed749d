"""Unit tests for the User entity."""

import pytest

from sitecraft.core.enums import ErrorCode
from sitecraft.core.result import Failure, Success
from sitecraft.domain.entities.user import User
from sitecraft.domain.errors import UserError


@pytest.fixture
def user() -> User:
    return User.create(email="alice@mail.com", username="alice", password_hash="hashed").value


@pytest.mark.unit
class TestUserCreate:
    def test_create_success(self):
        result = User.create(
            email="Alice@Mail.com", username="alice_01", password_hash="hashed"
        )

        assert isinstance(result, Success)
        assert str(result.value.email) == "Alice@mail.com"
        assert result.value.avatar is None

    def test_cjk_username_allowed(self):
        result = User.create(
            email="li@mail.com", username="\u5f20\u4e09", password_hash="hashed"
        )

        assert isinstance(result, Success)

    def test_invalid_email(self):
        result = User.create(email="not-an-email", username="alice", password_hash="x")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_EMAIL

    @pytest.mark.parametrize(
        ("username", "message"),
        [
            ("", UserError.USERNAME_REQUIRED),
            ("   ", UserError.USERNAME_REQUIRED),
            ("a", UserError.USERNAME_LENGTH),
            ("a" * 51, UserError.USERNAME_LENGTH),
            ("alice!", UserError.USERNAME_CHARACTERS),
            ("al ice", UserError.USERNAME_CHARACTERS),
        ],
    )
    def test_invalid_username(self, username, message):
        result = User.create(email="alice@mail.com", username=username, password_hash="x")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_USERNAME
        assert result.error.message == message


@pytest.mark.unit
class TestUserUpdates:
    def test_update_profile(self, user):
        result = user.update_profile(username="alice2", avatar="https://cdn.test/a.png")

        assert isinstance(result, Success)
        assert user.username == "alice2"
        assert user.avatar == "https://cdn.test/a.png"

    def test_update_profile_empty_avatar_clears(self, user):
        user.update_profile(avatar="https://cdn.test/a.png")

        user.update_profile(avatar="")

        assert user.avatar is None

    def test_update_profile_invalid_username_keeps_old(self, user):
        result = user.update_profile(username="!")

        assert isinstance(result, Failure)
        assert user.username == "alice"

    def test_update_email(self, user):
        assert isinstance(user.update_email("new@mail.com"), Success)
        assert str(user.email) == "new@mail.com"

    def test_update_email_invalid(self, user):
        result = user.update_email("broken")

        assert isinstance(result, Failure)
        assert str(user.email) == "alice@mail.com"


@pytest.mark.unit
class TestUserProjections:
    def test_public_info_hides_password(self, user):
        info = user.to_public_info()

        assert "password" not in info
        assert info["username"] == "alice"

    def test_persistence_round_trip(self, user):
        restored = User.from_persistence(user.to_persistence())

        assert restored == user
        assert restored.password_hash == "hashed"
