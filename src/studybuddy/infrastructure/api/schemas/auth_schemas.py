"""Pydantic schemas for authentication endpoints."""

from typing import Any

from pydantic import BaseModel, Field, model_validator


class _UserEnvelopeRequest(BaseModel):
    """Accepts both ``{"email": ...}`` and ``{"user": {"email": ...}}`` bodies."""

    @model_validator(mode="before")
    @classmethod
    def unwrap_user(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("user"), dict):
            return data["user"]
        return data


class SignupRequest(_UserEnvelopeRequest):
    """Request body for account signup."""

    email: str | None = Field(None, description="User's email address")
    password: str | None = Field(None, description="User's password")
    password_confirmation: str | None = Field(
        None, description="Must equal password when provided"
    )


class LoginRequest(_UserEnvelopeRequest):
    """Request body for login."""

    email: str | None = Field(None, description="User's email address")
    password: str | None = Field(None, description="User's password")


class UserPayload(BaseModel):
    """Account information in auth responses."""

    id: str = Field(..., description="Account ID")
    email: str = Field(..., description="Account email address")


class AuthResponse(BaseModel):
    """Response for successful signup or login."""

    message: str = Field(..., description="Outcome message")
    user: UserPayload = Field(..., description="Account information")
    token: str = Field(..., description="JWT access token")


class MeResponse(BaseModel):
    """Response for the current-account query."""

    user: UserPayload


class MessageResponse(BaseModel):
    """Response carrying only a message."""

    message: str


class ErrorResponse(BaseModel):
    """Response for authentication errors."""

    error: str = Field(..., description="Human-readable error message")


class ValidationErrorResponse(BaseModel):
    """Response for validation errors."""

    error: str = Field(..., description="Error summary")
    details: list[str] = Field(..., description="Full validation messages")
