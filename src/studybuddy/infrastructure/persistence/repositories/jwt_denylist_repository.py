"""Repository for the JWT denylist.

Stores revoked token identifiers together with the expiry of the token they
revoke, so that expired rows can be pruned.
"""

from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from studybuddy.core.logging import get_logger
from studybuddy.infrastructure.persistence.models import JwtDenylistModel

logger = get_logger(__name__)


def _as_naive_utc(moment: datetime) -> datetime:
    """Convert an aware datetime to naive UTC for storage."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


class JwtDenylistRepository:
    """Repository for JWT denylist database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def exists(self, jti: str) -> bool:
        """Check whether a token identifier has been revoked."""
        result = await self.session.execute(
            select(JwtDenylistModel.id).where(JwtDenylistModel.jti == jti)
        )
        return result.scalar_one_or_none() is not None

    async def add(self, jti: str, exp: datetime) -> bool:
        """Revoke a token identifier and commit.

        Adding a ``jti`` that is already present is a no-op, including when a
        concurrent request inserts it first.

        Args:
            jti: Token identifier to revoke.
            exp: Expiry of the revoked token.

        Returns:
            True if a new entry was written, False if it already existed.
        """
        if await self.exists(jti):
            return False

        self.session.add(JwtDenylistModel(jti=jti, exp=_as_naive_utc(exp)))
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.debug("Denylist entry already present", jti=jti)
            return False
        return True

    async def prune_expired(self, now: datetime | None = None) -> int:
        """Delete entries whose token has already expired and commit.

        Args:
            now: Reference instant. Defaults to the current UTC time.

        Returns:
            Number of entries deleted.
        """
        cutoff = _as_naive_utc(now or datetime.now(timezone.utc))
        result = await self.session.execute(
            delete(JwtDenylistModel).where(JwtDenylistModel.exp < cutoff)
        )
        await self.session.commit()
        return result.rowcount or 0
