"""Authentication infrastructure components.

This module provides password hashing, JWT token services and bearer-token
verification.
"""

from studybuddy.infrastructure.auth.authenticator import (
    AuthenticationError,
    Authenticator,
    InvalidOrExpiredTokenError,
    MissingTokenError,
    RevokedTokenError,
    extract_bearer_token,
)
from studybuddy.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTError,
    JWTService,
    TokenExpiredError,
)
from studybuddy.infrastructure.auth.password_hasher import (
    DUMMY_PASSWORD_HASH,
    hash_password,
    needs_rehash,
    verify_password,
)
from studybuddy.infrastructure.auth.token_types import AuthenticatedAccount, TokenClaims

__all__ = [
    "AuthenticatedAccount",
    "AuthenticationError",
    "Authenticator",
    "DUMMY_PASSWORD_HASH",
    "InvalidOrExpiredTokenError",
    "InvalidTokenError",
    "JWTError",
    "JWTService",
    "MissingTokenError",
    "RevokedTokenError",
    "TokenClaims",
    "TokenExpiredError",
    "extract_bearer_token",
    "hash_password",
    "needs_rehash",
    "verify_password",
]
