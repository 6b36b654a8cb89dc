"""Bearer-token authentication for protected requests.

Implements the Authenticator class which, for every protected request:
- extracts the bearer token from the Authorization header,
- verifies its signature and expiry,
- rejects it if its ``jti`` has been revoked,
- resolves the account it was issued for.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from studybuddy.core.logging import get_logger
from studybuddy.infrastructure.auth.jwt_service import JWTError, JWTService
from studybuddy.infrastructure.auth.token_types import AuthenticatedAccount
from studybuddy.infrastructure.persistence.repositories import (
    AccountRepository,
    JwtDenylistRepository,
)

logger = get_logger(__name__)


class AuthenticationError(Exception):
    """Base exception for authentication failures on protected requests."""

    message = "Authentication failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is presented."""

    message = "Missing authentication token"


class InvalidOrExpiredTokenError(AuthenticationError):
    """Raised for malformed, badly signed, expired or orphaned tokens.

    These causes share one message so callers cannot tell them apart.
    """

    message = "Invalid or expired token"


class RevokedTokenError(AuthenticationError):
    """Raised when a well-formed token has been revoked by logout."""

    message = "Token has been revoked"


def extract_bearer_token(authorization: str | None) -> str | None:
    """Pull the token out of an ``Authorization: Bearer <token>`` header.

    Returns:
        The token, or None if the header is absent or carries no token.
    """
    if not authorization:
        return None
    parts = authorization.split()
    if not parts:
        return None
    if parts[0].lower() == "bearer":
        parts = parts[1:]
    if not parts:
        return None
    return parts[-1]


class Authenticator:
    """Verifies bearer tokens and resolves the account behind them."""

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize the authenticator.

        Args:
            jwt_service: Service holding the signing secret.
        """
        self.jwt_service = jwt_service

    async def authenticate(
        self, authorization: str | None, session: AsyncSession
    ) -> AuthenticatedAccount:
        """Authenticate from an Authorization header value.

        Args:
            authorization: Raw Authorization header, or None if absent.
            session: Database session for the denylist and account lookups.

        Returns:
            AuthenticatedAccount: The account and verified claims.

        Raises:
            MissingTokenError: No token presented.
            InvalidOrExpiredTokenError: Token fails verification or its
                account no longer exists.
            RevokedTokenError: Token was revoked.
        """
        token = extract_bearer_token(authorization)
        if token is None:
            logger.info("Authentication failed: missing token")
            raise MissingTokenError()
        return await self.verify(token, session)

    async def verify(self, token: str | None, session: AsyncSession) -> AuthenticatedAccount:
        """Verify a raw token.

        Order: signature and expiry, then the denylist, then the account.
        """
        if not token:
            raise MissingTokenError()

        try:
            claims = self.jwt_service.decode_claims(token)
        except JWTError as e:
            logger.info("Authentication failed: token rejected", reason=str(e))
            raise InvalidOrExpiredTokenError() from e

        if claims.jti and await JwtDenylistRepository(session).exists(claims.jti):
            logger.info("Authentication failed: token revoked", jti=claims.jti)
            raise RevokedTokenError()

        account = await AccountRepository(session).get_by_id(claims.id)
        if account is None:
            logger.info("Authentication failed: account not found", account_id=claims.id)
            raise InvalidOrExpiredTokenError()

        return AuthenticatedAccount(account=account, claims=claims, token=token)
