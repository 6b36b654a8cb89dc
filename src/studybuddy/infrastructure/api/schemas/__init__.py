"""API request and response schemas."""

from studybuddy.infrastructure.api.schemas.auth_schemas import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    MeResponse,
    MessageResponse,
    SignupRequest,
    UserPayload,
    ValidationErrorResponse,
)

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "LoginRequest",
    "MeResponse",
    "MessageResponse",
    "SignupRequest",
    "UserPayload",
    "ValidationErrorResponse",
]
