"""Account repository for database operations."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from studybuddy.infrastructure.persistence.models import AccountModel


def normalize_email(email: str) -> str:
    """Strip surrounding whitespace and lower-case an email address."""
    return email.strip().lower()


class AccountRepository:
    """Repository for account database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, account: AccountModel) -> AccountModel:
        """Add an account and flush it.

        Args:
            account: Account model to create. Its email is normalized first.

        Returns:
            Created account model.
        """
        account.email = normalize_email(account.email)
        self.session.add(account)
        await self.session.flush()
        return account

    async def get_by_id(self, account_id: str) -> AccountModel | None:
        """Get an account by ID."""
        result = await self.session.execute(
            select(AccountModel).where(AccountModel.id == account_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> AccountModel | None:
        """Get an account by email, ignoring case.

        Args:
            email: Email address in any case.

        Returns:
            Account model if found, None otherwise.
        """
        result = await self.session.execute(
            select(AccountModel).where(
                func.lower(AccountModel.email) == normalize_email(email)
            )
        )
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Check whether an account already uses this email (case-insensitive)."""
        result = await self.session.execute(
            select(AccountModel.id).where(
                func.lower(AccountModel.email) == normalize_email(email)
            )
        )
        return result.scalar_one_or_none() is not None
