"""
Core utilities package for Plant Care Application.
Provides exceptions, password hashing and per-aggregate locks.
"""

from .security import (
    get_password_hash,
    verify_password,
    PasswordHasher,
    get_password_hasher
)

from .exceptions import (
    PlantCareException,
    AuthorizationError,
    ValidationError,
    NotFoundError,
    DuplicateResourceError,
    InvalidStateError,
    DatabaseError,
    RepositoryError,
    TransactionError
)

from .locks import AggregateLockRegistry

__all__ = [
    # Security
    "get_password_hash",
    "verify_password",
    "PasswordHasher",
    "get_password_hasher",

    # Exceptions
    "PlantCareException",
    "AuthorizationError",
    "ValidationError",
    "NotFoundError",
    "DuplicateResourceError",
    "InvalidStateError",
    "DatabaseError",
    "RepositoryError",
    "TransactionError",

    # Locks
    "AggregateLockRegistry",
]
