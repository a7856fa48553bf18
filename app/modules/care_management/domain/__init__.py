# 📄 File: app/modules/care_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules for care tasks
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting the Task entity, events and repository interface
# 🔗 Dependencies:
# Domain models, repositories, events from subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, infrastructure layer, PlantService, AnalysisService

from .models.task import Task, TaskPriority, TaskType
from .repositories.task_repository import TaskRepository
from .events.task_events import TaskCompleted, TaskCreated, TaskDeleted, TaskUpdated

__all__ = [
    "Task",
    "TaskPriority",
    "TaskType",
    "TaskRepository",
    "TaskCreated",
    "TaskUpdated",
    "TaskCompleted",
    "TaskDeleted",
]
