# 📄 File: app/modules/health_monitoring/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the logic that turns a plant check-up into updated numbers, tasks, alerts and points
# 🧪 Purpose (Technical Summary):
# Package initialization for the analysis domain service
# 🔗 Dependencies:
# PlantService, TaskGenerationService, NotificationService, PointsService
# 🔄 Connected Modules / Calls From:
# app.shared.core.dependencies

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .analysis_service import AnalysisService

__all__ = ["AnalysisService"]
