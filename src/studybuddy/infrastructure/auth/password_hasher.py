"""Password hashing utility using Argon2.

Provides password hashing and verification using the Argon2id algorithm.
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

_hasher = PasswordHasher()

# Hash of a random throwaway value, verified against when an account lookup
# misses so that unknown emails cost the same as wrong passwords.
DUMMY_PASSWORD_HASH = _hasher.hash("studybuddy-dummy-password")


def hash_password(password: str) -> str:
    """Hash a password using Argon2id.

    Args:
        password: The plaintext password to hash.

    Returns:
        The hashed password string.

    Example:
        >>> hashed = hash_password("secret1")
        >>> hashed.startswith("$argon2id$")
        True
    """
    return _hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a hash.

    Args:
        password: The plaintext password to verify.
        hashed: The hashed password to verify against.

    Returns:
        True if the password matches, False otherwise (including when the
        stored hash is unreadable).
    """
    try:
        return _hasher.verify(hashed, password)
    except (VerificationError, InvalidHashError):
        return False


def needs_rehash(hashed: str) -> bool:
    """Check if a password hash was produced with outdated parameters."""
    return _hasher.check_needs_rehash(hashed)
