"""SQLAlchemy model for the accounts table."""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from studybuddy.infrastructure.persistence.database import Base


class AccountModel(Base):
    """SQLAlchemy model for the accounts table.

    Attributes:
        id: Primary key (UUID string).
        email: Normalized (lower-cased) email address, unique.
        password_hash: Argon2 password hash.
        created_at: Timestamp when the account was created.
        updated_at: Timestamp when the account was last updated.
    """

    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Account ID (UUID)",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Normalized email address",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Hashed password (argon2)",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, email={self.email})>"
