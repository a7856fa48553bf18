# 📄 File: app/modules/notification_communication/domain/services/notification_service.py
# 🧭 Purpose (Layman Explanation):
# Writes the messages users see in their notification list: "Dehydration detected in Monstera",
# "New Badge Earned!" and friends, and marks them read when opened
# 🧪 Purpose (Technical Summary):
# Notification-emission engine: builds issue and badge notifications from domain data,
# persists them and returns Outcomes carrying NotificationCreated events
# 🔗 Dependencies:
# NotificationRepository, PlantRepository, Notification model, analysis payload types
# 🔄 Connected Modules / Calls From:
# analysis_service.py (issues), badge_service.py (badges), notification handlers, demo seeding

import logging
from typing import List, Optional

from app.modules.gamification.domain.models.badge import Badge
from app.modules.health_monitoring.domain.models.analysis import PlantIssue
from app.modules.notification_communication.domain.events.notification_events import (
    NotificationCreated,
    NotificationRead,
)
from app.modules.notification_communication.domain.models.notification import Notification, NotificationType
from app.modules.notification_communication.domain.repositories.notification_repository import (
    NotificationRepository,
)
from app.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from app.shared.core.exceptions import NotificationNotFoundError
from app.shared.events.base import Outcome

logger = logging.getLogger(__name__)

BADGE_NOTIFICATION_TITLE = "New Badge Earned!"


def issue_title(issue_name: str, plant_name: str) -> str:
    return f"{issue_name} detected in {plant_name}"


def badge_message(badge_name: str) -> str:
    return f'Congratulations! You\'ve earned the "{badge_name}" badge.'


class NotificationService:
    """
    Creates and updates user notifications.
    """

    def __init__(self, notification_repository: NotificationRepository, plant_repository: PlantRepository):
        self.notification_repository = notification_repository
        self.plant_repository = plant_repository

    async def create_notification(
        self,
        user_id: int,
        title: str,
        message: str,
        notification_type: NotificationType,
        related_id: Optional[int] = None,
    ) -> Outcome[Notification]:
        notification = await self.notification_repository.create(
            Notification(
                user_id=user_id,
                title=title,
                message=message,
                type=notification_type,
                related_id=related_id,
            )
        )
        logger.debug(f"Created {notification.type} notification {notification.id} for user {user_id}")
        event = NotificationCreated(
            user_id,
            notification.id,
            notification.type,
            notification.title,
            notification.related_id,
        )
        return Outcome(value=notification, events=[event])

    async def emit_issue_notifications(
        self,
        plant_id: int,
        user_id: int,
        issues: List[PlantIssue],
    ) -> Outcome[List[Notification]]:
        """
        Create one issue notification per detected issue.

        Does nothing when the plant does not exist.

        Returns:
            Outcome with the created notifications, in issue order
        """
        outcome: Outcome[List[Notification]] = Outcome(value=[])
        plant = await self.plant_repository.get_by_id(plant_id)
        if plant is None:
            logger.debug(f"Skipping issue notifications, plant {plant_id} not found")
            return outcome

        for issue in issues:
            notification = outcome.absorb(
                await self.create_notification(
                    user_id=user_id,
                    title=issue_title(issue.name, plant.name),
                    message=issue.description,
                    notification_type=NotificationType.ISSUE,
                    related_id=plant_id,
                )
            )
            outcome.value.append(notification)

        return outcome

    async def emit_badge_notification(self, user_id: int, badge: Badge) -> Outcome[Notification]:
        """Tell the user they earned a badge."""
        return await self.create_notification(
            user_id=user_id,
            title=BADGE_NOTIFICATION_TITLE,
            message=badge_message(badge.name),
            notification_type=NotificationType.BADGE,
            related_id=badge.id,
        )

    async def mark_read(self, notification_id: int) -> Outcome[Notification]:
        """
        Mark a notification as read. Marking it again is a no-op.

        Raises:
            NotificationNotFoundError: If the notification does not exist
        """
        notification = await self.notification_repository.get_by_id(notification_id)
        if notification is None:
            raise NotificationNotFoundError(notification_id)

        if notification.read:
            return Outcome(value=notification)

        notification = await self.notification_repository.mark_read(notification_id)
        return Outcome(value=notification, events=[NotificationRead(notification.user_id, notification_id)])
