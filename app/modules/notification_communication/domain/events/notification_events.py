# 📄 File: app/modules/notification_communication/domain/events/notification_events.py
# 🧭 Purpose (Layman Explanation):
# Events for when a message is created for a user or the user reads it
# 🧪 Purpose (Technical Summary):
# Notification domain events, consumed e.g. by push-delivery subscribers
# 🔗 Dependencies:
# app.shared.events.base
# 🔄 Connected Modules / Calls From:
# notification_service.py

from typing import Optional

from app.shared.events.base import UserEvent


class NotificationCreated(UserEvent):
    EVENT_TYPE = "notification.created"

    def __init__(
        self,
        user_id: int,
        notification_id: int,
        notification_type: str,
        title: str,
        related_id: Optional[int] = None,
        **kwargs
    ):
        data = {
            "notification_id": notification_id,
            "notification_type": notification_type,
            "title": title,
            "related_id": related_id,
        }
        kwargs.setdefault("category", "notification")
        super().__init__(self.EVENT_TYPE, user_id, data, **kwargs)

    @property
    def notification_type(self) -> str:
        return self.data["notification_type"]


class NotificationRead(UserEvent):
    EVENT_TYPE = "notification.read"

    def __init__(self, user_id: int, notification_id: int, **kwargs):
        kwargs.setdefault("category", "notification")
        super().__init__(self.EVENT_TYPE, user_id, {"notification_id": notification_id}, **kwargs)
