from .models import TaskModel
from .task_repository_impl import TaskRepositoryImpl

__all__ = [
    "TaskModel",
    "TaskRepositoryImpl",
]
