"""Token payload models for StudyBuddy access tokens."""

from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from studybuddy.infrastructure.persistence.models import AccountModel


class TokenClaims(BaseModel):
    """Claims carried by a StudyBuddy JWT."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Account identifier")
    email: str = Field(..., description="Email snapshot at issuance")
    jti: str | None = Field(None, description="Unique token identifier (revocation key)")
    exp: int = Field(..., description="Unix timestamp when the token expires")

    @property
    def expires_at(self) -> datetime:
        """Expiry as an aware UTC datetime."""
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)


@dataclass
class AuthenticatedAccount:
    """The identity established for one request by a verified token.

    Attributes:
        account: The account the token resolved to.
        claims: The verified claims of the presented token.
        token: The raw token string as presented.
    """

    account: AccountModel
    claims: TokenClaims
    token: str

    @property
    def id(self) -> str:
        return self.account.id

    @property
    def email(self) -> str:
        return self.account.email
