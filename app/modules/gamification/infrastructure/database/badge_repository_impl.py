# 📄 File: app/modules/gamification/infrastructure/database/badge_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file reads the badge catalog from the database and records which badges each user has earned.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of BadgeRepository using SQLAlchemy async ORM; requirements are stored
# as JSON and validated back into the typed requirement union on load.
#
# 🔗 Dependencies:
# - app.modules.gamification.domain.repositories.badge_repository (interface)
# - app.modules.gamification.infrastructure.database.models (SQLAlchemy models)
# - pydantic TypeAdapter for requirement (de)serialization
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.unit_of_work (repository wiring)
# - app.modules.gamification.infrastructure.seed (catalog seeding)

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.gamification.domain.models.badge import (
    Badge,
    EarnedBadge,
    UserBadge,
    parse_requirement,
    requirement_adapter,
)
from app.modules.gamification.domain.repositories.badge_repository import BadgeRepository
from app.modules.gamification.infrastructure.database.models import BadgeModel, UserBadgeModel
from app.shared.core.exceptions import DuplicateResourceError, RepositoryError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class BadgeRepositoryImpl(BadgeRepository):
    """
    SQLAlchemy implementation of the BadgeRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, badge: Badge) -> Badge:
        try:
            badge_model = BadgeModel(
                name=badge.name,
                description=badge.description,
                icon=badge.icon,
                requirements=requirement_adapter.dump_python(badge.requirements, mode="json"),
                points_bonus=badge.points_bonus,
            )
            self._session.add(badge_model)
            await self._session.flush()

            logger.info(f"Added badge '{badge.name}' to catalog with ID: {badge_model.id}")
            return self._badge_to_domain(badge_model)

        except IntegrityError as e:
            raise DuplicateResourceError(
                message=f"Badge '{badge.name}' already exists",
                resource_type="badge",
                field="name",
                value=badge.name
            ) from e

        except SQLAlchemyError as e:
            logger.error(f"Database error during badge creation: {str(e)}")
            raise RepositoryError(
                message="Failed to create badge",
                operation="create",
                entity="badge",
                details={"error": str(e)}
            ) from e

    async def get_by_id(self, badge_id: int) -> Optional[Badge]:
        try:
            badge_model = await self._session.get(BadgeModel, badge_id)
            return self._badge_to_domain(badge_model) if badge_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving badge {badge_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to retrieve badge",
                operation="get_by_id",
                entity="badge",
                details={"error": str(e)}
            ) from e

    async def get_by_name(self, name: str) -> Optional[Badge]:
        try:
            result = await self._session.execute(select(BadgeModel).where(BadgeModel.name == name))
            badge_model = result.scalar_one_or_none()
            return self._badge_to_domain(badge_model) if badge_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving badge '{name}': {str(e)}")
            raise RepositoryError(
                message="Failed to retrieve badge",
                operation="get_by_name",
                entity="badge",
                details={"error": str(e)}
            ) from e

    async def list_all(self) -> List[Badge]:
        try:
            result = await self._session.execute(select(BadgeModel).order_by(BadgeModel.id.asc()))
            return [self._badge_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing badges: {str(e)}")
            raise RepositoryError(
                message="Failed to list badges",
                operation="list_all",
                entity="badge",
                details={"error": str(e)}
            ) from e

    async def get_user_badge(self, user_id: int, badge_id: int) -> Optional[UserBadge]:
        try:
            stmt = select(UserBadgeModel).where(
                UserBadgeModel.user_id == user_id,
                UserBadgeModel.badge_id == badge_id,
            )
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            return self._user_badge_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving badge {badge_id} of user {user_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to retrieve user badge",
                operation="get_user_badge",
                entity="user_badge",
                details={"error": str(e)}
            ) from e

    async def add_user_badge(self, user_badge: UserBadge) -> Optional[UserBadge]:
        if await self.get_user_badge(user_badge.user_id, user_badge.badge_id) is not None:
            logger.info(f"User {user_badge.user_id} already holds badge {user_badge.badge_id}")
            return None

        model = UserBadgeModel(
            user_id=user_badge.user_id,
            badge_id=user_badge.badge_id,
            earned_at=user_badge.earned_at,
        )
        try:
            self._session.add(model)
            await self._session.flush()

        except IntegrityError as e:
            # Concurrent award from another process; the command rolls back
            raise DuplicateResourceError(
                message="Badge already awarded",
                resource_type="user_badge",
                field="badge_id",
                value=user_badge.badge_id
            ) from e

        except SQLAlchemyError as e:
            logger.error(f"Database error awarding badge {user_badge.badge_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to award badge",
                operation="add_user_badge",
                entity="user_badge",
                details={"error": str(e)}
            ) from e

        return self._user_badge_to_domain(model)

    async def list_user_badges(self, user_id: int) -> List[EarnedBadge]:
        try:
            stmt = (
                select(UserBadgeModel)
                .where(UserBadgeModel.user_id == user_id)
                .order_by(UserBadgeModel.earned_at.asc(), UserBadgeModel.id.asc())
            )
            result = await self._session.execute(stmt)
            return [
                EarnedBadge(badge=self._badge_to_domain(model.badge), earned_at=ensure_utc(model.earned_at))
                for model in result.scalars().unique().all()
            ]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing badges of user {user_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to list user badges",
                operation="list_user_badges",
                entity="user_badge",
                details={"error": str(e)}
            ) from e

    def _badge_to_domain(self, badge_model: BadgeModel) -> Badge:
        return Badge(
            id=badge_model.id,
            name=badge_model.name,
            description=badge_model.description,
            icon=badge_model.icon,
            requirements=parse_requirement(badge_model.requirements),
            points_bonus=badge_model.points_bonus,
        )

    def _user_badge_to_domain(self, model: UserBadgeModel) -> UserBadge:
        return UserBadge(
            id=model.id,
            user_id=model.user_id,
            badge_id=model.badge_id,
            earned_at=ensure_utc(model.earned_at),
        )
