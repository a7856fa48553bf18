# 📄 File: app/modules/care_management/application/commands/task_commands.py
# 🧭 Purpose (Layman Explanation):
# The requests for adding a care task, editing or ticking it off, and deleting it
# 🧪 Purpose (Technical Summary):
# CQRS command definitions for task operations; UpdateTaskCommand is a partial update and
# carries the completion flag
# 🔗 Dependencies:
# pydantic, task domain enums, app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.application.handlers.command_handlers

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from app.modules.care_management.domain.models.task import TaskPriority
from app.shared.core.commands import Command


class CreateTaskCommand(Command):
    plant_id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1, max_length=200)
    type: str = Field(..., min_length=1, max_length=50, description="Care action, e.g. water")
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None


class UpdateTaskCommand(Command):
    """
    Partial task update. Setting `completed` to True finishes the task;
    False is only accepted while the task is still open.
    """

    task_id: int = Field(..., gt=0)

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    completed: Optional[bool] = None

    def get_update_data(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude={"user_id", "task_id"})


class DeleteTaskCommand(Command):
    task_id: int = Field(..., gt=0)
