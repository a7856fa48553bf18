# 📄 File: app/modules/notification_communication/domain/models/notification.py
# 🧭 Purpose (Layman Explanation):
# Defines the in-app messages users receive - care task reminders, detected plant problems,
# new badges and plant-care tips - and whether each one has been read
# 🧪 Purpose (Technical Summary):
# Notification entity; everything except `read` is immutable once created
# 🔗 Dependencies:
# pydantic, datetime, enum
# 🔄 Connected Modules / Calls From:
# notification_service.py, notification_repository.py, notification handlers

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.shared.utils.helpers import utc_now


class NotificationType(str, Enum):
    """Notification categories shown with different icons in the client."""
    TASK = "task"
    ISSUE = "issue"
    BADGE = "badge"
    TIP = "tip"


class Notification(BaseModel):
    """
    Notification domain model.

    Fields:
    - id (int): Datastore-assigned identifier
    - user_id (int): Recipient
    - title / message: Display text
    - type: task | issue | badge | tip
    - read (bool): Whether the user has opened it
    - related_id (int): Plant id for issues, badge id for badges
    """

    model_config = ConfigDict(use_enum_values=True, from_attributes=True)

    id: Optional[int] = None
    user_id: int
    title: str = Field(..., min_length=1)
    message: str
    type: NotificationType
    read: bool = False
    related_id: Optional[int] = None
    created_at: datetime = Field(default_factory=utc_now)

    def mark_read(self) -> bool:
        """
        Returns:
            True if the notification was unread before
        """
        if self.read:
            return False
        self.read = True
        return True

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id
