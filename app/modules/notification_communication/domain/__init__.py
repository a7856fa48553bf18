# 📄 File: app/modules/notification_communication/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules for notifications
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting the Notification entity, events and repository interface
# 🔗 Dependencies:
# Domain models, repositories, events
# 🔄 Connected Modules / Calls From:
# Application layer, infrastructure layer, BadgeService, AnalysisService

from .models.notification import Notification, NotificationType
from .repositories.notification_repository import NotificationRepository
from .events.notification_events import NotificationCreated, NotificationRead

__all__ = [
    "Notification",
    "NotificationType",
    "NotificationRepository",
    "NotificationCreated",
    "NotificationRead",
]
