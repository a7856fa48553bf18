# 📄 File: app/modules/plant_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the business logic for managing plants
# 🧪 Purpose (Technical Summary):
# Package initialization for plant domain services
# 🔗 Dependencies:
# Domain models, repositories, gamification BadgeService
# 🔄 Connected Modules / Calls From:
# app.shared.core.dependencies, AnalysisService

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .plant_service import PlantService

__all__ = ["PlantService"]
