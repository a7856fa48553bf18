# 📄 File: app/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the rules for creating user accounts - making sure a username is free
# and that passwords are never stored as plain text.
# 🧪 Purpose (Technical Summary):
# Domain service for user registration and lookup with uniqueness validation and
# password hashing, returning Outcomes that carry the UserRegistered event.
# 🔗 Dependencies:
# User domain model, UserRepository, user events, shared exceptions
# 🔄 Connected Modules / Calls From:
# RegisterUser / GetUser handlers, bootstrap demo seeding

import logging

from ..events.user_events import UserRegistered
from ..models.user import User
from ..repositories.user_repository import UserRepository
from app.shared.core.exceptions import DuplicateResourceError, UserNotFoundError, ValidationError
from app.shared.events.base import Outcome

logger = logging.getLogger(__name__)


class UserService:
    """
    Domain service for user management business logic.
    """

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def register_user(self, username: str, password: str) -> Outcome[User]:
        """
        Register a new user at level 1 with 0 points.

        Args:
            username: Unique login name
            password: Plain text password, hashed before storage

        Returns:
            Outcome with the created User

        Raises:
            ValidationError: If the password is empty
            DuplicateResourceError: If the username is already taken
        """
        if not password:
            raise ValidationError(message="Password is required", field="password")

        username = username.strip()
        existing_user = await self.user_repository.get_by_username(username)
        if existing_user:
            raise DuplicateResourceError(
                message=f"Username '{username}' is already taken",
                resource_type="user",
                field="username",
                value=username
            )

        user = await self.user_repository.create(User.create_new_user(username, password))
        logger.info(f"Registered user {user.id} ({user.username})")

        return Outcome(value=user, events=[UserRegistered(user.id, user.username)])

    async def get_user(self, user_id: int) -> User:
        """
        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
