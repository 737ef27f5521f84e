"""Unit tests for the User aggregate and Email value object."""

import pytest

from fintrack_identity import Email, InvalidEmailError, User


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email(" Test@Example.COM ").value == "test@example.com"

    @pytest.mark.parametrize("value", ["", "no-at-sign", "a@b", "a b@example.com"])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)


class TestUser:
    def test_display_name_prefers_full_name(self):
        user = User.create("ada@example.com", name="ada", first_name="Ada")
        assert user.display_name == "Ada"

    def test_display_name_falls_back_to_name_then_email(self, test_user):
        assert test_user.display_name == "Test"
        assert User.create("x@example.com").display_name == "x@example.com"

    def test_update_profile_keeps_unset_fields(self, test_user):
        test_user.update_profile(last_name="Tester")

        assert test_user.name == "Test"
        assert test_user.last_name == "Tester"
