"""Domain services for StudyBuddy.

Services contain business logic that doesn't naturally fit within a single entity.
"""

from studybuddy.domain.services.auth_service import (
    INVALID_CREDENTIALS_MESSAGE,
    AuthResult,
    AuthService,
    InvalidCredentialsError,
    SignupValidationError,
)
from studybuddy.domain.services.signup_validator import (
    SignupValidationIssue,
    SignupValidator,
    default_signup_validator,
)

__all__ = [
    "INVALID_CREDENTIALS_MESSAGE",
    "AuthResult",
    "AuthService",
    "InvalidCredentialsError",
    "SignupValidationError",
    "SignupValidationIssue",
    "SignupValidator",
    "default_signup_validator",
]
