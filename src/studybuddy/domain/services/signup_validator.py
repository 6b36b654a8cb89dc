"""Signup validation service.

Validates the fields of a new account:
- Email presence, format and uniqueness
- Password presence and length
- Password confirmation match
"""

import re
from dataclasses import dataclass

EMAIL_REGEX = re.compile(r"\A[^@\s]+@[^@\s]+\Z")


@dataclass(frozen=True)
class SignupValidationIssue:
    """A single signup validation failure.

    Attributes:
        field: The field name.
        message: Full human-readable message.
        code: Machine-readable error code.
    """

    field: str
    message: str
    code: str


class SignupValidator:
    """Validates signup input.

    Default policy:
    - Email required and shaped like ``local@domain``
    - Password between 6 and 128 characters
    - Confirmation, when given, equal to the password
    """

    def __init__(self, min_password_length: int = 6, max_password_length: int = 128) -> None:
        self.min_password_length = min_password_length
        self.max_password_length = max_password_length

    def validate(
        self,
        email: str | None,
        password: str | None,
        password_confirmation: str | None = None,
        email_taken: bool = False,
    ) -> list[SignupValidationIssue]:
        """Validate signup input.

        Args:
            email: Requested email address.
            password: Requested password.
            password_confirmation: Optional confirmation; checked only when given.
            email_taken: Whether another account already uses the email.

        Returns:
            List of issues in a stable order. Empty list if input is valid.
        """
        issues: list[SignupValidationIssue] = []
        email = (email or "").strip()

        if not email:
            issues.append(
                SignupValidationIssue("email", "Email can't be blank", "email_blank")
            )
        else:
            if email_taken:
                issues.append(
                    SignupValidationIssue(
                        "email", "Email has already been taken", "email_taken"
                    )
                )
            if not EMAIL_REGEX.match(email):
                issues.append(
                    SignupValidationIssue("email", "Email is invalid", "email_invalid")
                )

        if not password:
            issues.append(
                SignupValidationIssue("password", "Password can't be blank", "password_blank")
            )

        if password_confirmation is not None and password_confirmation != (password or ""):
            issues.append(
                SignupValidationIssue(
                    "password_confirmation",
                    "Password confirmation doesn't match Password",
                    "password_confirmation_mismatch",
                )
            )

        if password:
            if len(password) < self.min_password_length:
                issues.append(
                    SignupValidationIssue(
                        "password",
                        f"Password is too short (minimum is {self.min_password_length} characters)",
                        "password_too_short",
                    )
                )
            elif len(password) > self.max_password_length:
                issues.append(
                    SignupValidationIssue(
                        "password",
                        f"Password is too long (maximum is {self.max_password_length} characters)",
                        "password_too_long",
                    )
                )

        return issues


default_signup_validator = SignupValidator()
