from .task_events import TaskCompleted, TaskCreated, TaskDeleted, TaskUpdated

__all__ = [
    "TaskCreated",
    "TaskUpdated",
    "TaskCompleted",
    "TaskDeleted",
]
