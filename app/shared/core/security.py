"""
Security utilities for password hashing.
Authentication and sessions live in the HTTP collaborator; the engine only
needs to store and check password hashes for registered users.
"""

import logging
from functools import lru_cache
from typing import Optional

from passlib.context import CryptContext

from ..config.settings import get_settings
from .exceptions import PlantCareException

logger = logging.getLogger(__name__)


class PasswordHasher:
    """
    Thin wrapper around a passlib CryptContext.
    The scheme comes from PASSWORD_HASH_SCHEME so deployments can move
    to a stronger scheme while old hashes still verify.
    """

    def __init__(self, scheme: Optional[str] = None):
        self.scheme = scheme or get_settings().PASSWORD_HASH_SCHEME
        self.context = CryptContext(schemes=[self.scheme], deprecated="auto")

    def get_password_hash(self, password: str) -> str:
        """
        Hash password with the configured scheme.

        Args:
            password: Plain text password

        Returns:
            str: Hashed password
        """
        try:
            hashed = self.context.hash(password)
            logger.debug("Password hashed successfully")
            return hashed
        except (ValueError, TypeError) as e:
            logger.error(f"Password hashing failed: {e}")
            raise PlantCareException(
                message="Password processing failed",
                error_code="PASSWORD_HASH_ERROR"
            )

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against hash.

        Args:
            plain_password: Plain text password
            hashed_password: Stored hashed password

        Returns:
            bool: True if password matches
        """
        try:
            is_valid = self.context.verify(plain_password, hashed_password)
            logger.debug(f"Password verification {'successful' if is_valid else 'failed'}")
            return is_valid
        except (ValueError, TypeError) as e:
            logger.error(f"Password verification error: {e}")
            return False


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    """Get cached password hasher instance."""
    return PasswordHasher()


def get_password_hash(password: str) -> str:
    """Hash password using the configured scheme."""
    return get_password_hasher().get_password_hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return get_password_hasher().verify_password(plain_password, hashed_password)
