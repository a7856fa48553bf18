# 📄 File: app/modules/health_monitoring/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules for plant check-ups
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting the analysis entity, its value objects, events and repository
# 🔗 Dependencies:
# Domain models, repositories, events from subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, infrastructure layer, TaskGenerationService, NotificationService

from .models.analysis import PlantAnalysis, PlantIssue, Recommendation, RecommendationPriority
from .repositories.analysis_repository import AnalysisRepository
from .events.analysis_events import AnalysisRecorded

__all__ = [
    "PlantAnalysis",
    "PlantIssue",
    "Recommendation",
    "RecommendationPriority",
    "AnalysisRepository",
    "AnalysisRecorded",
]
