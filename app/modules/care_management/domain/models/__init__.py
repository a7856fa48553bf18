from .task import MUTABLE_TASK_FIELDS, Task, TaskPriority, TaskType

__all__ = [
    "Task",
    "TaskPriority",
    "TaskType",
    "MUTABLE_TASK_FIELDS",
]
