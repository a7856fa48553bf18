# 📄 File: app/modules/gamification/domain/services/badge_service.py
# 🧭 Purpose (Layman Explanation):
# Decides whether a user gets a badge: never twice, only when they have really earned it,
# and each new badge comes with a congratulation message and bonus points
# 🧪 Purpose (Technical Summary):
# Badge-award rule engine. try_award_badge is idempotent per (user, badge) and only awards badges whose
# requirement is met, by the caller's progress or by progress counted from the store; a successful award
# inserts the UserBadge, emits the badge notification and grants the badge's points bonus, in that order
# 🔗 Dependencies:
# BadgeRepository, UserRepository, PlantRepository, TaskRepository, NotificationService, PointsService,
# badge events
# 🔄 Connected Modules / Calls From:
# plant_service.py (First Plant), task_generation_service.py (Hydration Pro), AwardBadge handler

import logging
from typing import List, Optional

from app.modules.care_management.domain.models.task import TaskType
from app.modules.care_management.domain.repositories.task_repository import TaskRepository
from app.modules.gamification.domain.events.badge_events import BadgeEarned
from app.modules.gamification.domain.models.badge import Badge, BadgeProgress, EarnedBadge, UserBadge
from app.modules.gamification.domain.repositories.badge_repository import BadgeRepository
from app.modules.notification_communication.domain.services.notification_service import NotificationService
from app.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.domain.services.points_service import PointsService
from app.shared.core.exceptions import BadgeNotFoundError, UserNotFoundError
from app.shared.events.base import Outcome
from app.shared.utils.logging import get_logger

logger = logging.getLogger(__name__)
business_logger = get_logger(__name__)


class BadgeService:
    """
    Domain service awarding badges.
    """

    def __init__(
        self,
        badge_repository: BadgeRepository,
        user_repository: UserRepository,
        plant_repository: PlantRepository,
        task_repository: TaskRepository,
        notification_service: NotificationService,
        points_service: PointsService,
    ):
        self.badge_repository = badge_repository
        self.user_repository = user_repository
        self.plant_repository = plant_repository
        self.task_repository = task_repository
        self.notification_service = notification_service
        self.points_service = points_service

    async def gather_progress(self, user_id: int) -> BadgeProgress:
        """Count the user's achievements that have a badge rule from stored plants and tasks."""
        return BadgeProgress(
            plants_added=await self.plant_repository.count_by_user(user_id),
            watering_completed=await self.task_repository.count_completed_by_type(
                user_id, TaskType.WATER.value
            ),
        )

    async def try_award_badge(
        self,
        user_id: int,
        badge_name: str,
        context: Optional[BadgeProgress] = None,
    ) -> Outcome[Optional[UserBadge]]:
        """
        Award a badge if the user has earned it and does not hold it yet.

        Args:
            user_id: User to award
            badge_name: Catalog name of the badge
            context: Progress gathered by the caller; when omitted, progress
                is counted from the user's stored plants and tasks

        Returns:
            Outcome with the new UserBadge, or with None and no events
            when nothing was awarded

        Raises:
            BadgeNotFoundError: If the badge name is not in the catalog
            UserNotFoundError: If the user does not exist
        """
        badge = await self.badge_repository.get_by_name(badge_name)
        if badge is None:
            raise BadgeNotFoundError(badge_name)

        if await self.user_repository.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        if await self.badge_repository.get_user_badge(user_id, badge.id) is not None:
            logger.debug(f"User {user_id} already holds badge '{badge_name}'")
            return Outcome()

        if not badge.is_evaluable:
            logger.debug(f"Badge '{badge_name}' has no rule that can award it")
            return Outcome()

        progress = context if context is not None else await self.gather_progress(user_id)
        if not badge.requirement_met(progress):
            logger.debug(f"Requirement for badge '{badge_name}' not met by user {user_id}")
            return Outcome()

        user_badge = await self.badge_repository.add_user_badge(UserBadge(user_id=user_id, badge_id=badge.id))
        if user_badge is None:
            return Outcome()

        outcome: Outcome[Optional[UserBadge]] = Outcome(value=user_badge)
        outcome.add(BadgeEarned(user_id, badge.id, badge.name, badge.points_bonus))
        outcome.absorb(await self.notification_service.emit_badge_notification(user_id, badge))
        outcome.absorb(await self.points_service.grant_points(user_id, badge.points_bonus, reason=f"badge:{badge.name}"))

        business_logger.log_business_event(
            "badge_earned",
            f"User {user_id} earned badge '{badge.name}'",
            entity_id=badge.id,
            entity_type="badge",
            extra={"user_id": user_id, "points_bonus": badge.points_bonus}
        )
        return outcome

    async def list_badges(self) -> List[Badge]:
        return await self.badge_repository.list_all()

    async def list_user_badges(self, user_id: int) -> List[EarnedBadge]:
        if await self.user_repository.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)
        return await self.badge_repository.list_user_badges(user_id)
