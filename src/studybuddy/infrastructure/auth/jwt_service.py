"""JWT token service.

Issues and validates the HS256-signed access tokens handed to clients.
Every token carries exactly the claims ``id``, ``email``, ``jti`` and
``exp``.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from pydantic import ValidationError

from studybuddy.core.config import Settings
from studybuddy.infrastructure.auth.token_types import TokenClaims
from studybuddy.infrastructure.persistence.models import AccountModel


class JWTError(Exception):
    """Base exception for JWT-related errors."""

    pass


class TokenExpiredError(JWTError):
    """Raised when a token has expired."""

    pass


class InvalidTokenError(JWTError):
    """Raised when a token is malformed, badly signed or missing claims."""

    pass


class JWTService:
    """Service for creating and validating JWT access tokens.

    The signing secret is supplied at construction and never read from
    anywhere else.
    """

    DEFAULT_ALGORITHM = "HS256"
    DEFAULT_LIFETIME = timedelta(hours=24)
    REQUIRED_CLAIMS = ["exp", "id"]

    def __init__(
        self,
        secret_key: str,
        lifetime: timedelta | None = None,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        """Initialize the JWT service.

        Args:
            secret_key: Symmetric secret for signing and verifying tokens.
            lifetime: Token lifetime. Defaults to 24 hours.
            algorithm: HMAC signing algorithm. Only HS256 is supported.
        """
        if not secret_key:
            raise ValueError("A non-empty secret key is required")
        self._secret_key = secret_key
        if algorithm != self.DEFAULT_ALGORITHM:
            raise ValueError(f"Unsupported signing algorithm: {algorithm}")
        self.algorithm = algorithm
        self.lifetime = lifetime or self.DEFAULT_LIFETIME

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTService":
        """Build the service from application settings."""
        return cls(
            secret_key=settings.secret_key.get_secret_value(),
            lifetime=timedelta(hours=settings.access_token_expire_hours),
            algorithm=settings.jwt_algorithm,
        )

    def __repr__(self) -> str:
        return f"JWTService(algorithm={self.algorithm!r}, lifetime={self.lifetime!r})"

    def issue(
        self,
        account: AccountModel,
        expires_delta: timedelta | None = None,
        now: datetime | None = None,
    ) -> str:
        """Issue a signed access token for an account.

        Args:
            account: The authenticated account.
            expires_delta: Custom lifetime. Defaults to the service lifetime.
            now: Issuance instant. Defaults to the current UTC time.

        Returns:
            Encoded JWT (three dot-separated segments).
        """
        issued_at = now or datetime.now(timezone.utc)
        expire = issued_at + (self.lifetime if expires_delta is None else expires_delta)

        payload = {
            "id": account.id,
            "email": account.email,
            "jti": str(uuid.uuid4()),
            "exp": int(expire.timestamp()),
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Decode and validate a JWT.

        Verifies the signature, the algorithm, the expiry and the presence of
        the required claims.

        Args:
            token: The encoded JWT.

        Returns:
            Decoded token payload.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid.
        """
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require": self.REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token") from e

    def decode_claims(self, token: str) -> TokenClaims:
        """Decode and validate a JWT into typed claims.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid or its claims are malformed.
        """
        payload = self.decode(token)
        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as e:
            raise InvalidTokenError("Invalid token claims") from e

    def peek_claims(self, token: str | None) -> TokenClaims | None:
        """Read claims without verifying the signature or expiry.

        Only for best-effort bookkeeping on a request that has already been
        authenticated. Never use the result to make an access decision.

        Returns:
            The claims, or None if the token cannot be parsed.
        """
        if not token:
            return None
        try:
            payload = jwt.decode(token, options={"verify_signature": False})
            return TokenClaims.model_validate(payload)
        except (jwt.InvalidTokenError, ValidationError):
            return None
