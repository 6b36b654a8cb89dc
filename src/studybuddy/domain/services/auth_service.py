"""Authentication service.

Orchestrates the account store, the token issuer and the denylist to
implement signup, login, logout and the "who am I" query.
"""

import uuid
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from studybuddy.core.logging import get_logger
from studybuddy.domain.entities import Account
from studybuddy.domain.services.signup_validator import (
    SignupValidationIssue,
    SignupValidator,
    default_signup_validator,
)
from studybuddy.infrastructure.auth import (
    DUMMY_PASSWORD_HASH,
    AuthenticatedAccount,
    JWTService,
    hash_password,
    needs_rehash,
    verify_password,
)
from studybuddy.infrastructure.persistence.models import AccountModel
from studybuddy.infrastructure.persistence.repositories import (
    AccountRepository,
    JwtDenylistRepository,
    normalize_email,
)

logger = get_logger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class SignupValidationError(Exception):
    """Raised when signup input fails validation. Nothing is persisted."""

    def __init__(self, issues: list[SignupValidationIssue]) -> None:
        self.issues = issues
        super().__init__("; ".join(self.details))

    @property
    def details(self) -> list[str]:
        """Full messages, in validation order."""
        return [issue.message for issue in self.issues]


class InvalidCredentialsError(Exception):
    """Raised on any login failure. The message never says which part was wrong."""

    def __init__(self) -> None:
        self.message = INVALID_CREDENTIALS_MESSAGE
        super().__init__(self.message)


@dataclass(frozen=True)
class AuthResult:
    """An account together with a freshly issued token."""

    account: Account
    token: str


def _to_entity(model: AccountModel) -> Account:
    return Account(id=model.id, email=model.email)


class AuthService:
    """Service for authentication business logic."""

    def __init__(
        self,
        session: AsyncSession,
        jwt_service: JWTService,
        validator: SignupValidator | None = None,
    ) -> None:
        """Initialize the auth service.

        Args:
            session: SQLAlchemy async session.
            jwt_service: Token issuer holding the signing secret.
            validator: Signup validator. Defaults to the standard policy.
        """
        self.session = session
        self.jwt_service = jwt_service
        self.validator = validator or default_signup_validator
        self.account_repo = AccountRepository(session)
        self.denylist_repo = JwtDenylistRepository(session)

    async def signup(
        self,
        email: str | None,
        password: str | None,
        password_confirmation: str | None = None,
    ) -> AuthResult:
        """Register an account and log it in.

        Args:
            email: Requested email address (any case).
            password: Plaintext password.
            password_confirmation: Optional confirmation of the password.

        Returns:
            AuthResult with the new account and its first token.

        Raises:
            SignupValidationError: If any field is invalid or the email is taken.
        """
        normalized = normalize_email(email or "")
        email_taken = bool(normalized) and await self.account_repo.email_exists(normalized)

        issues = self.validator.validate(
            email, password, password_confirmation, email_taken=email_taken
        )
        if issues:
            logger.info(
                "Signup failed: validation",
                email=normalized,
                error_count=len(issues),
            )
            raise SignupValidationError(issues)

        account = AccountModel(
            id=str(uuid.uuid4()),
            email=normalized,
            password_hash=hash_password(password),
        )
        try:
            await self.account_repo.create(account)
            await self.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email
            await self.session.rollback()
            logger.info("Signup failed: email taken at commit", email=normalized)
            raise SignupValidationError(
                [SignupValidationIssue("email", "Email has already been taken", "email_taken")]
            )

        logger.info("Account created", account_id=account.id, email=account.email)

        return AuthResult(account=_to_entity(account), token=self.jwt_service.issue(account))

    async def login(self, email: str | None, password: str | None) -> AuthResult:
        """Authenticate with email and password.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password.
        """
        account = await self.account_repo.get_by_email(email or "")

        if account is None:
            # Keep timing close to the wrong-password path
            verify_password(password or "", DUMMY_PASSWORD_HASH)
            logger.info("Login failed: account not found", email=normalize_email(email or ""))
            raise InvalidCredentialsError()

        if not verify_password(password or "", account.password_hash):
            logger.info("Login failed: invalid password", account_id=account.id)
            raise InvalidCredentialsError()

        if needs_rehash(account.password_hash):
            account.password_hash = hash_password(password)
            await self.session.commit()
            logger.info("Password hash upgraded", account_id=account.id)

        logger.info("Login successful", account_id=account.id)

        return AuthResult(account=_to_entity(account), token=self.jwt_service.issue(account))

    async def logout(self, current: AuthenticatedAccount, raw_token: str | None = None) -> bool:
        """Revoke the token that authenticated the current request.

        Uses the claims verified for this request. Falls back to reading
        ``raw_token`` only when those claims carry no ``jti``. A token that
        yields no ``jti`` is left alone; logout still succeeds.

        Returns:
            True if a denylist entry was written.
        """
        claims = current.claims
        if claims is None or not claims.jti:
            claims = self.jwt_service.peek_claims(raw_token)

        if claims is None or not claims.jti:
            logger.info("Logout without revocation: no token id", account_id=current.id)
            return False

        added = await self.denylist_repo.add(claims.jti, claims.expires_at)
        logger.info("Logged out", account_id=current.id, jti=claims.jti, revoked=added)
        return added

    @staticmethod
    def who_am_i(current: AuthenticatedAccount) -> dict[str, str]:
        """Project the authenticated account to ``{id, email}``."""
        return _to_entity(current.account).to_dict()
