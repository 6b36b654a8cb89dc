"""Domain entities for StudyBuddy."""

from studybuddy.domain.entities.account import Account

__all__ = ["Account"]
