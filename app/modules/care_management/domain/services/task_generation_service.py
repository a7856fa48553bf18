# 📄 File: app/modules/care_management/domain/services/task_generation_service.py
# 🧭 Purpose (Layman Explanation):
# Turns the advice from a plant check-up into a to-do list, and rewards the user when they
# tick a task off (with a badge after five waterings)
# 🧪 Purpose (Technical Summary):
# Task-generation engine: maps urgent / recommended recommendations to urgent / high tasks due in
# 24h / 72h, skips maintenance advice, and runs the completion trigger (+points, Hydration Pro)
# 🔗 Dependencies:
# TaskRepository, PointsService, BadgeService, gamification rules, analysis payload types
# 🔄 Connected Modules / Calls From:
# analysis_service.py (materialize), task_service.py (completion trigger)

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from app.modules.care_management.domain.events.task_events import TaskCompleted, TaskCreated
from app.modules.care_management.domain.models.task import Task, TaskPriority, TaskType
from app.modules.care_management.domain.repositories.task_repository import TaskRepository
from app.modules.gamification.domain.models.badge import BadgeProgress
from app.modules.gamification.domain.rules import HYDRATION_PRO
from app.modules.gamification.domain.services.badge_service import BadgeService
from app.modules.health_monitoring.domain.models.analysis import Recommendation, RecommendationPriority
from app.modules.user_management.domain.services.points_service import PointsService
from app.shared.events.base import Outcome
from app.shared.utils.helpers import hours_from_now, utc_now

logger = logging.getLogger(__name__)

DEFAULT_TASK_COMPLETION_POINTS = 10
DEFAULT_URGENT_DUE_HOURS = 24
DEFAULT_RECOMMENDED_DUE_HOURS = 72


class TaskGenerationService:
    """
    Creates tasks from analysis recommendations and reacts to task completion.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        points_service: PointsService,
        badge_service: BadgeService,
        task_completion_points: int = DEFAULT_TASK_COMPLETION_POINTS,
        urgent_due_hours: int = DEFAULT_URGENT_DUE_HOURS,
        recommended_due_hours: int = DEFAULT_RECOMMENDED_DUE_HOURS,
    ):
        self.task_repository = task_repository
        self.points_service = points_service
        self.badge_service = badge_service
        self.task_completion_points = task_completion_points
        # recommendation priority -> (task priority, hours until due)
        self._schedule: Dict[str, Tuple[str, int]] = {
            RecommendationPriority.URGENT.value: (TaskPriority.URGENT.value, urgent_due_hours),
            RecommendationPriority.RECOMMENDED.value: (TaskPriority.HIGH.value, recommended_due_hours),
        }

    async def materialize_tasks_from_recommendations(
        self,
        plant_id: int,
        user_id: int,
        recommendations: List[Recommendation],
        now: Optional[datetime] = None,
    ) -> Outcome[List[Task]]:
        """
        Create one task per urgent or recommended recommendation.

        Maintenance recommendations produce no task. Title, description
        and type are copied from the recommendation.

        Args:
            plant_id: Plant the analysis was recorded for
            user_id: Owner of the plant
            recommendations: Recommendations in analysis order
            now: Reference time for due dates (defaults to the current time)

        Returns:
            Outcome with the created tasks in recommendation order
        """
        now = now or utc_now()
        outcome: Outcome[List[Task]] = Outcome(value=[])

        for recommendation in recommendations:
            schedule = self._schedule.get(recommendation.priority)
            if schedule is None:
                continue

            priority, due_hours = schedule
            task = await self.task_repository.create(
                Task(
                    plant_id=plant_id,
                    user_id=user_id,
                    title=recommendation.title,
                    description=recommendation.description,
                    type=recommendation.type,
                    priority=priority,
                    due_date=hours_from_now(due_hours, now),
                    created_at=now,
                )
            )
            outcome.value.append(task)
            outcome.add(
                TaskCreated(
                    task.id, plant_id, user_id, task.type, task.priority,
                    source="recommendation",
                    due_date=task.due_date.isoformat(),
                )
            )

        logger.debug(
            f"Generated {len(outcome.value)} tasks from {len(recommendations)} recommendations for plant {plant_id}"
        )
        return outcome

    async def on_task_completed(self, task: Task) -> Outcome[Task]:
        """
        Completion trigger, run once per task on its false -> true transition.

        Grants the completion points, then for water tasks re-evaluates
        Hydration Pro over the user's total completed water tasks.
        """
        outcome: Outcome[Task] = Outcome(value=task)
        outcome.add(TaskCompleted(task.id, task.plant_id, task.user_id, task.type))
        outcome.absorb(
            await self.points_service.grant_points(
                task.user_id, self.task_completion_points, reason="task_completed"
            )
        )

        if task.is_water_task:
            completed_waterings = await self.task_repository.count_completed_by_type(
                task.user_id, TaskType.WATER.value
            )
            outcome.absorb(
                await self.badge_service.try_award_badge(
                    task.user_id,
                    HYDRATION_PRO,
                    BadgeProgress(watering_completed=completed_waterings),
                )
            )

        return outcome
