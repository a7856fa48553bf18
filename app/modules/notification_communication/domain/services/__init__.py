# 📄 File: app/modules/notification_communication/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the logic for writing notifications and marking them read
# 🧪 Purpose (Technical Summary):
# Package initialization for the notification domain service
# 🔗 Dependencies:
# NotificationRepository, PlantRepository
# 🔄 Connected Modules / Calls From:
# app.shared.core.dependencies, BadgeService, AnalysisService, app.bootstrap

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .notification_service import NotificationService

__all__ = ["NotificationService"]
