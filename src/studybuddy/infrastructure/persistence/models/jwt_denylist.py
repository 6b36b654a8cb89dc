"""SQLAlchemy model for the JWT denylist.

Each row revokes one issued token, keyed by its ``jti`` claim.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from studybuddy.infrastructure.persistence.database import Base


class JwtDenylistModel(Base):
    """SQLAlchemy model for the jwt_denylist table.

    Attributes:
        id: Surrogate primary key.
        jti: Token identifier of the revoked token (unique).
        exp: Expiry of the revoked token (UTC). Rows past this instant
            can be pruned.
    """

    __tablename__ = "jwt_denylist"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    jti: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Token ID (jti claim)",
    )
    exp: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        index=True,
        comment="Original token expiry (UTC)",
    )

    def __repr__(self) -> str:
        return f"<JwtDenylist(jti={self.jti}, exp={self.exp})>"
