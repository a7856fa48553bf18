# 📄 File: app/modules/notification_communication/domain/repositories/notification_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how notifications are saved, listed for a user and marked as read
# 🧪 Purpose (Technical Summary):
# Repository interface for Notification entities
# 🔗 Dependencies:
# Notification domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# notification_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.notification import Notification


class NotificationRepository(ABC):
    """
    Repository interface for Notification entity data access operations.
    """

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def get_by_id(self, notification_id: int) -> Optional[Notification]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[Notification]:
        """
        Get a user's notifications, newest first.

        Ties on created_at are broken by the higher id first.
        """
        pass

    @abstractmethod
    async def mark_read(self, notification_id: int) -> Optional[Notification]:
        """
        Set the read flag.

        Returns:
            Updated Notification, or None if it does not exist
        """
        pass
