# 📄 File: app/modules/care_management/domain/events/task_events.py
# 🧭 Purpose (Layman Explanation):
# Events for care tasks being created, edited, finished or removed
# 🧪 Purpose (Technical Summary):
# Task lifecycle domain events; TaskCompleted is raised only on the false -> true transition
# 🔗 Dependencies:
# app.shared.events.base
# 🔄 Connected Modules / Calls From:
# task_service.py, task_generation_service.py

from typing import List, Optional

from app.shared.events.base import PlantEvent


class TaskCreated(PlantEvent):
    """
    Event fired when a task is created, by the user or from a recommendation.
    """

    EVENT_TYPE = "task.created"

    def __init__(
        self,
        task_id: int,
        plant_id: int,
        user_id: int,
        task_type: str,
        priority: str,
        source: str = "user",
        due_date: Optional[str] = None,
        **kwargs
    ):
        data = {
            "task_id": task_id,
            "task_type": task_type,
            "priority": priority,
            "source": source,
            "due_date": due_date,
        }
        kwargs.setdefault("category", "care")
        super().__init__(self.EVENT_TYPE, plant_id, user_id, data, **kwargs)

    @property
    def task_id(self) -> int:
        return self.data["task_id"]


class TaskUpdated(PlantEvent):
    EVENT_TYPE = "task.updated"

    def __init__(self, task_id: int, plant_id: int, user_id: int, changed_fields: List[str], **kwargs):
        kwargs.setdefault("category", "care")
        super().__init__(
            self.EVENT_TYPE, plant_id, user_id,
            {"task_id": task_id, "changed_fields": changed_fields},
            **kwargs
        )


class TaskCompleted(PlantEvent):
    EVENT_TYPE = "task.completed"

    def __init__(self, task_id: int, plant_id: int, user_id: int, task_type: str, **kwargs):
        kwargs.setdefault("category", "care")
        super().__init__(
            self.EVENT_TYPE, plant_id, user_id,
            {"task_id": task_id, "task_type": task_type},
            **kwargs
        )


class TaskDeleted(PlantEvent):
    EVENT_TYPE = "task.deleted"

    def __init__(self, task_id: int, plant_id: int, user_id: int, **kwargs):
        kwargs.setdefault("category", "care")
        super().__init__(self.EVENT_TYPE, plant_id, user_id, {"task_id": task_id}, **kwargs)
