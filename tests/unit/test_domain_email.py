"""Unit tests for the Email value object."""

import pytest

from sitecraft.core.enums import ErrorCode
from sitecraft.domain.errors import InvalidValueError
from sitecraft.domain.value_objects import Email


@pytest.mark.unit
class TestEmail:
    def test_valid_email(self):
        email = Email("alice@mail.com")

        assert str(email) == "alice@mail.com"
        assert repr(email) == "Email('alice@mail.com')"

    def test_domain_is_normalized_to_lowercase(self):
        assert Email("alice@Mail.COM").value == "alice@mail.com"

    @pytest.mark.parametrize("value", ["", "alice", "alice@", "@mail.com", "a b@mail.com"])
    def test_invalid_email(self, value):
        with pytest.raises(InvalidValueError) as exc_info:
            Email(value)

        assert exc_info.value.code == ErrorCode.INVALID_EMAIL
        assert exc_info.value.field == "email"
        assert exc_info.value.message.startswith("Invalid email: ")

    def test_equality_by_value(self):
        assert Email("bob@mail.com") == Email("bob@Mail.com")
