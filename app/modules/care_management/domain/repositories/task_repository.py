# 📄 File: app/modules/care_management/domain/repositories/task_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how care tasks are saved, looked up, changed and cleaned up when a plant goes away
# 🧪 Purpose (Technical Summary):
# Repository interface for Task entities, including the completed-water count behind Hydration Pro
# 🔗 Dependencies:
# Task domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# task_service.py, task_generation_service.py, plant_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.task import Task


class TaskRepository(ABC):
    """
    Repository interface for Task entity data access operations.
    """

    @abstractmethod
    async def create(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def get_by_id(self, task_id: int) -> Optional[Task]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[Task]:
        """Get a user's tasks ordered by due date, undated tasks last."""
        pass

    @abstractmethod
    async def list_by_plant(self, plant_id: int) -> List[Task]:
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """
        Persist every mutable field of the task.

        Raises:
            TaskNotFoundError: If the task no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, task_id: int) -> bool:
        pass

    @abstractmethod
    async def delete_by_plant(self, plant_id: int) -> int:
        """
        Delete every task of a plant.

        Returns:
            Number of deleted tasks
        """
        pass

    @abstractmethod
    async def count_completed_by_type(self, user_id: int, task_type: str) -> int:
        pass
