# 📄 File: app/modules/health_monitoring/domain/services/analysis_service.py
# 🧭 Purpose (Layman Explanation):
# Saves a plant check-up and follows it through: updates the plant's health, adds the suggested
# care tasks, warns the user about problems and rewards them for checking on their plant
# 🧪 Purpose (Technical Summary):
# Analysis ingestion pipeline. record_analysis runs, strictly in order: plant lookup, analysis insert,
# health snapshot overwrite, task generation, issue notifications, points grant
# 🔗 Dependencies:
# AnalysisRepository, PlantService, TaskGenerationService, NotificationService, PointsService
# 🔄 Connected Modules / Calls From:
# RecordAnalysis / ListAnalyses / GetLatestAnalysis handlers, demo seeding

import logging
from typing import List, Optional

from app.modules.care_management.domain.services.task_generation_service import TaskGenerationService
from app.modules.health_monitoring.domain.events.analysis_events import AnalysisRecorded
from app.modules.health_monitoring.domain.models.analysis import PlantAnalysis, PlantIssue, Recommendation
from app.modules.health_monitoring.domain.repositories.analysis_repository import AnalysisRepository
from app.modules.notification_communication.domain.services.notification_service import NotificationService
from app.modules.plant_management.domain.models.plant import HealthMetrics
from app.modules.plant_management.domain.services.plant_service import PlantService
from app.modules.user_management.domain.services.points_service import PointsService
from app.shared.core.exceptions import AnalysisNotFoundError
from app.shared.events.base import Outcome

logger = logging.getLogger(__name__)

DEFAULT_ANALYSIS_POINTS = 15


class AnalysisService:
    """
    Records plant analyses and derives everything that follows from them.
    """

    def __init__(
        self,
        analysis_repository: AnalysisRepository,
        plant_service: PlantService,
        task_generation_service: TaskGenerationService,
        notification_service: NotificationService,
        points_service: PointsService,
        analysis_points: int = DEFAULT_ANALYSIS_POINTS,
    ):
        self.analysis_repository = analysis_repository
        self.plant_service = plant_service
        self.task_generation_service = task_generation_service
        self.notification_service = notification_service
        self.points_service = points_service
        self.analysis_points = analysis_points

    async def record_analysis(
        self,
        plant_id: int,
        user_id: int,
        metrics: HealthMetrics,
        issues: List[PlantIssue],
        recommendations: List[Recommendation],
        image_url: Optional[str] = None,
    ) -> Outcome[PlantAnalysis]:
        """
        Record an analysis and apply its consequences.

        Must run inside a single transaction: a failure in any step
        leaves nothing behind once the caller rolls back.

        Args:
            plant_id: Analysed plant
            user_id: User recording the analysis
            metrics: Health metrics, each 0-100
            issues: Detected issues, one notification each
            recommendations: Suggested actions, urgent / recommended ones become tasks
            image_url: Optional photo of the plant

        Returns:
            Outcome with the stored analysis; events follow the step order

        Raises:
            PlantNotFoundError: If the plant does not exist
        """
        plant = await self.plant_service.get_plant(plant_id)

        analysis = await self.analysis_repository.create(
            PlantAnalysis.from_metrics(plant_id, user_id, metrics, issues, recommendations, image_url)
        )
        outcome: Outcome[PlantAnalysis] = Outcome(value=analysis)
        outcome.add(
            AnalysisRecorded(
                analysis.id, plant_id, user_id,
                analysis.health_score, len(analysis.issues), len(analysis.recommendations),
            )
        )

        outcome.absorb(await self.plant_service.apply_health_snapshot(plant, metrics))
        outcome.absorb(
            await self.task_generation_service.materialize_tasks_from_recommendations(
                plant_id, user_id, analysis.recommendations
            )
        )
        outcome.absorb(
            await self.notification_service.emit_issue_notifications(plant_id, user_id, analysis.issues)
        )
        outcome.absorb(
            await self.points_service.grant_points(user_id, self.analysis_points, reason="analysis")
        )

        logger.info(
            f"Recorded analysis {analysis.id} for plant {plant_id}: health {analysis.health_score}, "
            f"{len(analysis.issues)} issues, {len(analysis.recommendations)} recommendations"
        )
        return outcome

    async def list_analyses(self, plant_id: int) -> List[PlantAnalysis]:
        return await self.analysis_repository.list_by_plant(plant_id)

    async def get_latest_analysis(self, plant_id: int) -> PlantAnalysis:
        """
        Raises:
            AnalysisNotFoundError: If the plant has no analysis yet
        """
        analysis = await self.analysis_repository.get_latest(plant_id)
        if analysis is None:
            raise AnalysisNotFoundError(plant_id)
        return analysis
