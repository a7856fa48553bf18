# 📄 File: app/modules/care_management/domain/models/task.py
# 🧭 Purpose (Layman Explanation):
# Defines a care task for a plant, like "Water thoroughly" or "Clean leaves", how urgent it is,
# when it is due and whether the user has done it yet
# 🧪 Purpose (Technical Summary):
# Task entity with a one-way completion flag: completing is idempotent, reopening is rejected
# 🔗 Dependencies:
# pydantic, datetime, enum
# 🔄 Connected Modules / Calls From:
# task_service.py, task_generation_service.py, task_repository.py, care handlers

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.helpers import utc_now


class TaskPriority(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskType(str, Enum):
    """
    Task types the app knows about. Task.type also accepts other
    lowercase labels coming from analysis recommendations.
    """
    WATER = "water"
    FERTILIZE = "fertilize"
    CLEAN = "clean"
    REPOT = "repot"
    PRUNE = "prune"
    ROTATE = "rotate"
    INSPECT = "inspect"


# Fields a caller may change through a partial update
MUTABLE_TASK_FIELDS = ("title", "description", "type", "priority", "due_date", "completed")


class Task(BaseModel):
    """
    Care task domain model.

    Fields:
    - id (int): Datastore-assigned identifier
    - plant_id / user_id: Plant the task belongs to and its owner
    - title / description: Display text
    - type (str): Care action, e.g. "water"
    - priority: urgent | high | medium | low
    - completed (bool): Flips to True once and stays there
    - due_date: Optional deadline
    """

    model_config = ConfigDict(validate_assignment=True, use_enum_values=True, from_attributes=True)

    id: Optional[int] = None
    plant_id: int
    user_id: int
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    type: str = Field(..., min_length=1, max_length=50)
    priority: TaskPriority = TaskPriority.MEDIUM.value
    completed: bool = False
    due_date: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator('type', mode='before')
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        if isinstance(v, TaskType):
            return v.value
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        title = v.strip()
        if not title:
            raise ValueError('Task title is required')
        return title

    @property
    def is_water_task(self) -> bool:
        return self.type == TaskType.WATER.value

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    def apply_changes(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial update, leaving `completed` to the caller.

        Returns:
            Dict of the fields whose value actually changed
        """
        changed = {}
        for field, value in changes.items():
            if field not in MUTABLE_TASK_FIELDS or field == "completed":
                continue
            previous = getattr(self, field)
            setattr(self, field, value)
            if getattr(self, field) != previous:
                changed[field] = getattr(self, field)
        return changed

    def complete(self) -> bool:
        """
        Mark the task done.

        Returns:
            True only on the false -> true transition
        """
        if self.completed:
            return False
        self.completed = True
        return True
