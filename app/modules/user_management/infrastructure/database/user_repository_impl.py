# 📄 File: app/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for user accounts, like creating new users,
# finding existing users and saving the points and levels they earn.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of UserRepository using SQLAlchemy async ORM,
# mapping between UserModel rows and User domain entities with error translation.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.user_repository (interface)
# - app.modules.user_management.infrastructure.database.models (SQLAlchemy models)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.unit_of_work (repository wiring)

"""
User Repository Implementation

Features:
- Async database operations with proper error handling
- Domain model to SQLAlchemy model mapping
- Row locking (SELECT ... FOR UPDATE) for score updates
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.infrastructure.database.models import UserModel
from app.shared.core.exceptions import DuplicateResourceError, RepositoryError, UserNotFoundError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the user repository.

        Args:
            session: SQLAlchemy async session owned by the unit of work
        """
        self._session = session

    async def create(self, user: User) -> User:
        try:
            user_model = self._domain_to_model(user)

            self._session.add(user_model)
            await self._session.flush()

            logger.info(f"Created user with ID: {user_model.id}")
            return self._model_to_domain(user_model)

        except IntegrityError as e:
            logger.warning(f"User creation failed - username already exists: {user.username}")
            raise DuplicateResourceError(
                message=f"Username '{user.username}' is already taken",
                resource_type="user",
                field="username",
                value=user.username
            ) from e

        except SQLAlchemyError as e:
            logger.error(f"Database error during user creation: {str(e)}")
            raise RepositoryError(
                message="Failed to create user",
                operation="create",
                entity="user",
                details={"error": str(e)}
            ) from e

    async def get_by_id(self, user_id: int, for_update: bool = False) -> Optional[User]:
        try:
            user_model = await self._get_model(user_id, for_update)

            if user_model:
                return self._model_to_domain(user_model)

            logger.debug(f"User not found: {user_id}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {user_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to retrieve user",
                operation="get_by_id",
                entity="user",
                details={"error": str(e)}
            ) from e

    async def get_by_username(self, username: str) -> Optional[User]:
        try:
            stmt = select(UserModel).where(UserModel.username == username)
            result = await self._session.execute(stmt)
            user_model = result.scalar_one_or_none()
            return self._model_to_domain(user_model) if user_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user by username: {str(e)}")
            raise RepositoryError(
                message="Failed to retrieve user",
                operation="get_by_username",
                entity="user",
                details={"error": str(e)}
            ) from e

    async def update_score(self, user: User) -> User:
        try:
            user_model = await self._get_model(user.id, for_update=True)
            if user_model is None:
                raise UserNotFoundError(user.id)

            user_model.points = user.points
            user_model.level = user.level
            await self._session.flush()

            logger.debug(f"Updated score for user {user.id}: {user.points} points, level {user.level}")
            return self._model_to_domain(user_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating user {user.id}: {str(e)}")
            raise RepositoryError(
                message="Failed to update user score",
                operation="update_score",
                entity="user",
                details={"error": str(e)}
            ) from e

    async def _get_model(self, user_id: int, for_update: bool = False) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _domain_to_model(self, user: User) -> UserModel:
        """
        Convert domain User entity to SQLAlchemy UserModel.
        """
        return UserModel(
            id=user.id,
            username=user.username,
            password_hash=user.password_hash,
            level=user.level,
            points=user.points,
            created_at=user.created_at,
        )

    def _model_to_domain(self, user_model: UserModel) -> User:
        """
        Convert SQLAlchemy UserModel to domain User entity.
        """
        return User(
            id=user_model.id,
            username=user_model.username,
            password_hash=user_model.password_hash,
            level=user_model.level,
            points=user_model.points,
            created_at=ensure_utc(user_model.created_at),
        )
