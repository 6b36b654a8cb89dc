"""StudyBuddy - JWT authentication backend.

Issues and validates signed bearer tokens for user accounts and revokes
them through a denylist.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
