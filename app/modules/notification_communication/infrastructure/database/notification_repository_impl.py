# 📄 File: app/modules/notification_communication/infrastructure/database/notification_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file saves notifications, lists a user's newest messages first and marks them as read.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of NotificationRepository using SQLAlchemy async ORM.
#
# 🔗 Dependencies:
# - app.modules.notification_communication.domain.repositories.notification_repository (interface)
# - app.modules.notification_communication.infrastructure.database.models (SQLAlchemy models)
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.unit_of_work (repository wiring)

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.notification_communication.domain.models.notification import Notification
from app.modules.notification_communication.domain.repositories.notification_repository import (
    NotificationRepository,
)
from app.modules.notification_communication.infrastructure.database.models import NotificationModel
from app.shared.core.exceptions import RepositoryError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class NotificationRepositoryImpl(NotificationRepository):
    """
    SQLAlchemy implementation of the NotificationRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, notification: Notification) -> Notification:
        try:
            model = NotificationModel(
                user_id=notification.user_id,
                title=notification.title,
                message=notification.message,
                type=notification.type,
                read=notification.read,
                related_id=notification.related_id,
                created_at=notification.created_at,
            )
            self._session.add(model)
            await self._session.flush()
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error during notification creation: {str(e)}")
            raise RepositoryError(
                message="Failed to create notification",
                operation="create",
                entity="notification",
                details={"error": str(e)}
            ) from e

    async def get_by_id(self, notification_id: int) -> Optional[Notification]:
        try:
            model = await self._session.get(NotificationModel, notification_id)
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving notification {notification_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to retrieve notification",
                operation="get_by_id",
                entity="notification",
                details={"error": str(e)}
            ) from e

    async def list_by_user(self, user_id: int) -> List[Notification]:
        try:
            stmt = (
                select(NotificationModel)
                .where(NotificationModel.user_id == user_id)
                .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing notifications for user {user_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to list notifications",
                operation="list_by_user",
                entity="notification",
                details={"error": str(e)}
            ) from e

    async def mark_read(self, notification_id: int) -> Optional[Notification]:
        try:
            model = await self._session.get(NotificationModel, notification_id)
            if model is None:
                return None

            model.read = True
            await self._session.flush()
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error marking notification {notification_id} read: {str(e)}")
            raise RepositoryError(
                message="Failed to update notification",
                operation="mark_read",
                entity="notification",
                details={"error": str(e)}
            ) from e

    def _model_to_domain(self, model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            message=model.message,
            type=model.type,
            read=model.read,
            related_id=model.related_id,
            created_at=ensure_utc(model.created_at),
        )
