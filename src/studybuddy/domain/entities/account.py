"""Account entity.

An account is a registered identity: a stable id and a unique,
case-insensitive email. The password hash never leaves the persistence
layer, so it is not part of the entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Public view of a registered account.

    Attributes:
        id: Unique, stable identifier (UUID string).
        email: Normalized email address.
    """

    id: str
    email: str

    def __post_init__(self) -> None:
        """Validate account data after initialization."""
        if not self.id:
            raise ValueError("Account ID is required")
        if not self.email:
            raise ValueError("Email is required")

    def to_dict(self) -> dict[str, str]:
        """Serialize to the ``{id, email}`` shape used in responses."""
        return {"id": self.id, "email": self.email}
