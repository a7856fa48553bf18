# 📄 File: app/modules/care_management/domain/services/task_service.py
# 🧭 Purpose (Layman Explanation):
# Lets users add their own care tasks, edit them, tick them off and delete them
# 🧪 Purpose (Technical Summary):
# Task CRUD with the completion trigger: a false -> true update of `completed` runs
# TaskGenerationService.on_task_completed exactly once; reopening a finished task is rejected
# 🔗 Dependencies:
# TaskRepository, PlantRepository, TaskGenerationService, task events
# 🔄 Connected Modules / Calls From:
# care_management command handlers

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from app.modules.care_management.domain.events.task_events import TaskCreated, TaskDeleted, TaskUpdated
from app.modules.care_management.domain.models.task import Task
from app.modules.care_management.domain.repositories.task_repository import TaskRepository
from app.modules.care_management.domain.services.task_generation_service import TaskGenerationService
from app.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from app.shared.core.exceptions import (
    InvalidStateError,
    PlantNotFoundError,
    TaskNotFoundError,
    ValidationError,
)
from app.shared.events.base import Outcome

logger = logging.getLogger(__name__)


class TaskService:
    """
    Domain service for user-driven task changes.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        plant_repository: PlantRepository,
        task_generation_service: TaskGenerationService,
    ):
        self.task_repository = task_repository
        self.plant_repository = plant_repository
        self.task_generation_service = task_generation_service

    async def create_task(
        self,
        plant_id: int,
        user_id: int,
        title: str,
        task_type: str,
        description: Optional[str] = None,
        priority: str = "medium",
        due_date: Optional[datetime] = None,
    ) -> Outcome[Task]:
        """
        Create a task for an existing plant.

        Raises:
            PlantNotFoundError: If the plant does not exist
        """
        if await self.plant_repository.get_by_id(plant_id) is None:
            raise PlantNotFoundError(plant_id)

        task = await self.task_repository.create(
            Task(
                plant_id=plant_id,
                user_id=user_id,
                title=title,
                description=description,
                type=task_type,
                priority=priority,
                due_date=due_date,
            )
        )
        event = TaskCreated(
            task.id, plant_id, user_id, task.type, task.priority,
            due_date=task.due_date.isoformat() if task.due_date else None,
        )
        return Outcome(value=task, events=[event])

    async def get_task(self, task_id: int) -> Task:
        task = await self.task_repository.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def update_task(self, task_id: int, changes: Dict[str, Any]) -> Outcome[Task]:
        """
        Apply a partial update to a task.

        Setting `completed` to True on an open task runs the completion
        trigger once; setting it on a finished task again does nothing.

        Raises:
            TaskNotFoundError: If the task does not exist
            InvalidStateError: If the update tries to reopen a completed task
            ValidationError: If a field value is invalid
        """
        task = await self.get_task(task_id)
        outcome: Outcome[Task] = Outcome()

        completed = changes.get("completed")
        if completed is False and task.completed:
            raise InvalidStateError(
                message="A completed task cannot be reopened",
                resource_type="task",
                resource_id=task_id,
                current_state="completed"
            )

        try:
            changed = task.apply_changes(changes)
        except ValueError as e:
            raise ValidationError(message=f"Invalid task update: {e}", details={"task_id": task_id}) from e

        just_completed = bool(completed) and task.complete()
        if just_completed:
            changed["completed"] = True

        if changed:
            task = await self.task_repository.update(task)
            outcome.add(TaskUpdated(task.id, task.plant_id, task.user_id, sorted(changed)))

        if just_completed:
            logger.debug(f"Task {task_id} completed by user {task.user_id}")
            outcome.absorb(await self.task_generation_service.on_task_completed(task))

        outcome.value = task
        return outcome

    async def delete_task(self, task_id: int) -> Outcome[bool]:
        """
        Raises:
            TaskNotFoundError: If the task does not exist
        """
        task = await self.get_task(task_id)
        await self.task_repository.delete(task_id)
        return Outcome(value=True, events=[TaskDeleted(task.id, task.plant_id, task.user_id)])
