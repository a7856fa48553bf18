# 📄 File: app/modules/gamification/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the logic that hands out badges exactly once
# 🧪 Purpose (Technical Summary):
# Package initialization for the badge domain service
# 🔗 Dependencies:
# BadgeRepository, UserRepository, NotificationService, PointsService
# 🔄 Connected Modules / Calls From:
# app.shared.core.dependencies, PlantService, TaskGenerationService

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .badge_service import BadgeService

__all__ = ["BadgeService"]
