"""Repositories for StudyBuddy persistence."""

from studybuddy.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
    normalize_email,
)
from studybuddy.infrastructure.persistence.repositories.jwt_denylist_repository import (
    JwtDenylistRepository,
)

__all__ = [
    "AccountRepository",
    "JwtDenylistRepository",
    "normalize_email",
]
