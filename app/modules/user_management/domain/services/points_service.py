# 📄 File: app/modules/user_management/domain/services/points_service.py
# 🧭 Purpose (Layman Explanation):
# Hands out points when users look after their plants and moves them up a level
# every time they collect another hundred points
# 🧪 Purpose (Technical Summary):
# Points/leveling engine: validates the grant, applies it to the locked user row and
# returns the updated user together with PointsGranted / UserLeveledUp events
# 🔗 Dependencies:
# UserRepository, User model, user events, shared exceptions and logging
# 🔄 Connected Modules / Calls From:
# badge_service.py, task_generation_service.py, analysis_service.py, GrantPoints handler

import logging

from app.modules.user_management.domain.events.user_events import PointsGranted, UserLeveledUp
from app.modules.user_management.domain.models.user import DEFAULT_POINTS_PER_LEVEL, User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import UserNotFoundError, ValidationError
from app.shared.events.base import Outcome
from app.shared.utils.logging import get_logger

logger = logging.getLogger(__name__)
business_logger = get_logger(__name__)


class PointsService:
    """
    Points and leveling rules.

    Every grant adds a non-negative amount and recomputes the level as
    points // points_per_level + 1, raising it only when the result is
    higher than the stored level.
    """

    def __init__(self, user_repository: UserRepository, points_per_level: int = DEFAULT_POINTS_PER_LEVEL):
        self.user_repository = user_repository
        self.points_per_level = points_per_level

    async def grant_points(self, user_id: int, amount: int, reason: str = "") -> Outcome[User]:
        """
        Add points to a user and recompute the level.

        Args:
            user_id: User receiving the points
            amount: Non-negative number of points
            reason: Short label recorded on the event (e.g. "analysis")

        Returns:
            Outcome with the updated User

        Raises:
            ValidationError: If amount is negative or not an integer
            UserNotFoundError: If the user does not exist
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValidationError(
                message="Points amount must be an integer",
                field="amount",
                value=amount
            )
        if amount < 0:
            raise ValidationError(
                message="Points amount cannot be negative",
                field="amount",
                value=amount,
                constraint="non_negative"
            )

        user = await self.user_repository.get_by_id(user_id, for_update=True)
        if user is None:
            raise UserNotFoundError(user_id)

        previous_level, new_level = user.grant_points(amount, self.points_per_level)
        user = await self.user_repository.update_score(user)

        outcome = Outcome(value=user)
        outcome.add(PointsGranted(user_id, amount, user.points, reason))
        logger.debug(f"Granted {amount} points to user {user_id} ({reason or 'unspecified'}), total {user.points}")

        if new_level > previous_level:
            outcome.add(UserLeveledUp(user_id, previous_level, new_level))
            business_logger.log_business_event(
                "user_leveled_up",
                f"User {user_id} reached level {new_level}",
                entity_id=user_id,
                entity_type="user",
                extra={"previous_level": previous_level, "points": user.points}
            )

        return outcome
