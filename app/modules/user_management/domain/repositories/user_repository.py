# 📄 File: app/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find and update user accounts without saying which database is used
# 🧪 Purpose (Technical Summary):
# Repository interface for User entities following the Repository pattern and dependency inversion
# 🔗 Dependencies:
# Domain models (User), typing, abc
# 🔄 Connected Modules / Calls From:
# points_service.py, infrastructure implementation, application handlers

from abc import ABC, abstractmethod
from typing import Optional

from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (User), not database models
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: User entity to create

        Returns:
            Created User entity with its datastore id

        Raises:
            DuplicateResourceError: If the username is taken
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int, for_update: bool = False) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID to find
            for_update: Lock the row for the rest of the transaction

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def update_score(self, user: User) -> User:
        """
        Persist the user's points and level.

        Args:
            user: User entity carrying the new score

        Returns:
            Updated User entity

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        pass
