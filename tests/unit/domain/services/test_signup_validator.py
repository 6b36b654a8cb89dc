import pytest

from studybuddy.domain.services.signup_validator import (
    SignupValidator,
    default_signup_validator,
)


def messages(issues):
    return [issue.message for issue in issues]


class TestSignupValidator:

    def test_valid_input(self):
        assert default_signup_validator.validate("a@x.com", "secret1") == []

    def test_valid_with_matching_confirmation(self):
        assert default_signup_validator.validate("a@x.com", "secret1", "secret1") == []

    # --- Email ---

    @pytest.mark.parametrize("email", [None, "", "   "])
    def test_email_blank(self, email):
        issues = default_signup_validator.validate(email, "secret1")

        assert messages(issues) == ["Email can't be blank"]
        assert issues[0].field == "email"
        assert issues[0].code == "email_blank"

    @pytest.mark.parametrize("email", ["not-an-email", "a@", "@x.com", "a b@x.com", "a@@x.com"])
    def test_email_invalid(self, email):
        assert messages(default_signup_validator.validate(email, "secret1")) == [
            "Email is invalid"
        ]

    def test_email_taken(self):
        issues = default_signup_validator.validate("a@x.com", "secret1", email_taken=True)

        assert messages(issues) == ["Email has already been taken"]
        assert issues[0].code == "email_taken"

    # --- Password ---

    @pytest.mark.parametrize("password", [None, ""])
    def test_password_blank(self, password):
        assert messages(default_signup_validator.validate("a@x.com", password)) == [
            "Password can't be blank"
        ]

    def test_password_too_short(self):
        assert messages(default_signup_validator.validate("a@x.com", "12345")) == [
            "Password is too short (minimum is 6 characters)"
        ]

    def test_password_length_boundaries(self):
        assert default_signup_validator.validate("a@x.com", "x" * 6) == []
        assert default_signup_validator.validate("a@x.com", "x" * 128) == []

    def test_password_too_long(self):
        assert messages(default_signup_validator.validate("a@x.com", "x" * 129)) == [
            "Password is too long (maximum is 128 characters)"
        ]

    def test_confirmation_mismatch(self):
        issues = default_signup_validator.validate("a@x.com", "secret1", "secret2")

        assert messages(issues) == ["Password confirmation doesn't match Password"]
        assert issues[0].field == "password_confirmation"

    def test_confirmation_not_given_is_not_checked(self):
        assert default_signup_validator.validate("a@x.com", "secret1", None) == []

    # --- Combined ---

    def test_all_issues_reported_in_order(self):
        issues = default_signup_validator.validate("bad", "123", "456", email_taken=True)

        assert messages(issues) == [
            "Email has already been taken",
            "Email is invalid",
            "Password confirmation doesn't match Password",
            "Password is too short (minimum is 6 characters)",
        ]

    def test_everything_blank(self):
        assert messages(default_signup_validator.validate("", "")) == [
            "Email can't be blank",
            "Password can't be blank",
        ]

    def test_custom_length_policy(self):
        validator = SignupValidator(min_password_length=10, max_password_length=12)

        assert messages(validator.validate("a@x.com", "short")) == [
            "Password is too short (minimum is 10 characters)"
        ]
        assert messages(validator.validate("a@x.com", "x" * 13)) == [
            "Password is too long (maximum is 12 characters)"
        ]
