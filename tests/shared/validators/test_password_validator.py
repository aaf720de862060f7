"""Tests for the password validators."""

import pytest

from src.shared.validators import InvalidInputError, ValidationRule
from src.shared.validators.password import check_password_login, check_password_sign_up


class TestSignUpPasswordValidation:
    """Test sign-up password strength validation."""

    def test_valid_password_with_all_requirements(self):
        """Test password with all requirements passes validation."""
        assert check_password_sign_up("Abcdef1!") == "Abcdef1!"

    def test_valid_password_is_trimmed(self):
        """Test surrounding whitespace is removed before checking."""
        assert check_password_sign_up("  Secure@Pass123  ") == "Secure@Pass123"

    @pytest.mark.parametrize("special", list("@$!%*#?&"))
    def test_each_special_character_is_accepted(self, special):
        """Test every allowed special character satisfies the requirement."""
        password = f"Passw0rd{special}"
        assert check_password_sign_up(password) == password

    def test_password_without_uppercase_or_special_fails(self):
        """Test password with only lowercase letters and a digit fails."""
        with pytest.raises(InvalidInputError) as exc_info:
            check_password_sign_up("abcdefg1")
        assert exc_info.value.rule == ValidationRule.STRENGTH

    def test_password_without_lowercase_fails(self):
        with pytest.raises(InvalidInputError, match="lowercase"):
            check_password_sign_up("ABCDEFG1!")

    def test_password_without_digit_fails(self):
        with pytest.raises(InvalidInputError):
            check_password_sign_up("Abcdefgh!")

    def test_password_without_special_character_fails(self):
        with pytest.raises(InvalidInputError):
            check_password_sign_up("Abcdefgh1")

    def test_short_password_fails(self):
        """Test password shorter than 8 characters fails on length."""
        with pytest.raises(InvalidInputError) as exc_info:
            check_password_sign_up("short1!")
        assert exc_info.value.rule == ValidationRule.LENGTH

    def test_password_with_disallowed_character_fails(self):
        """Test characters outside letters, digits and the special set are rejected."""
        with pytest.raises(InvalidInputError):
            check_password_sign_up("Abcdef1!^")

    def test_password_with_inner_space_fails(self):
        with pytest.raises(InvalidInputError):
            check_password_sign_up("Abc def1!")

    def test_password_with_unicode_characters_fails(self):
        with pytest.raises(InvalidInputError):
            check_password_sign_up("Sécure123!")

    def test_numeric_password_fails(self):
        with pytest.raises(InvalidInputError):
            check_password_sign_up("1234567890")

    def test_missing_password_fails(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_password_sign_up(None)
        assert exc_info.value.rule == ValidationRule.REQUIRED

    def test_non_string_password_fails(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_password_sign_up(12345678)
        assert exc_info.value.rule == ValidationRule.TYPE

    def test_label_appears_in_message(self):
        with pytest.raises(InvalidInputError, match="new password") as exc_info:
            check_password_sign_up("weak", "new password")
        assert exc_info.value.field == "new password"

    def test_idempotent(self):
        once = check_password_sign_up(" Abcdef1! ")
        assert check_password_sign_up(once) == once


class TestLoginPasswordValidation:
    """Test login password presence validation."""

    def test_weak_password_is_accepted(self):
        """Test strength is not re-validated at login."""
        assert check_password_login("weak") == "weak"

    def test_password_is_trimmed(self):
        assert check_password_login("  secret  ") == "secret"

    def test_blank_password_fails(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_password_login("   ")
        assert exc_info.value.rule == ValidationRule.EMPTY

    def test_missing_password_fails(self):
        with pytest.raises(InvalidInputError, match="You must supply a password"):
            check_password_login(None)

    def test_non_string_password_fails(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_password_login(["Abcdef1!"])
        assert exc_info.value.rule == ValidationRule.TYPE
