"""SQLAlchemy models for StudyBuddy persistence."""

from studybuddy.infrastructure.persistence.models.account import AccountModel
from studybuddy.infrastructure.persistence.models.jwt_denylist import JwtDenylistModel

__all__ = [
    "AccountModel",
    "JwtDenylistModel",
]
