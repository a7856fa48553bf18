from .task_commands import CreateTaskCommand, DeleteTaskCommand, UpdateTaskCommand

__all__ = [
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "DeleteTaskCommand",
]
