# 📄 File: app/modules/plant_management/domain/events/plant_events.py
# 🧭 Purpose (Layman Explanation):
# Defines the things that can happen to a plant - being added, edited, removed or getting a new
# health check - so other parts of the app can react
# 🧪 Purpose (Technical Summary):
# Plant lifecycle domain events built on the shared PlantEvent base
# 🔗 Dependencies:
# app.shared.events.base
# 🔄 Connected Modules / Calls From:
# plant_service.py, event subscribers

from typing import Any, Dict, List

from app.shared.events.base import PlantEvent


class PlantCreated(PlantEvent):
    """Event fired when a user adds a plant."""

    EVENT_TYPE = "plant.created"

    def __init__(self, plant_id: int, user_id: int, name: str, plant_count: int, **kwargs):
        super().__init__(
            self.EVENT_TYPE, plant_id, user_id,
            {"name": name, "plant_count": plant_count},
            **kwargs
        )


class PlantUpdated(PlantEvent):
    EVENT_TYPE = "plant.updated"

    def __init__(self, plant_id: int, user_id: int, changed_fields: List[str], **kwargs):
        super().__init__(self.EVENT_TYPE, plant_id, user_id, {"changed_fields": changed_fields}, **kwargs)


class PlantDeleted(PlantEvent):
    """Event fired when a plant and its care tasks are deleted."""

    EVENT_TYPE = "plant.deleted"

    def __init__(self, plant_id: int, user_id: int, deleted_task_count: int, **kwargs):
        super().__init__(
            self.EVENT_TYPE, plant_id, user_id,
            {"deleted_task_count": deleted_task_count},
            **kwargs
        )


class PlantHealthUpdated(PlantEvent):
    """Event fired when an analysis overwrites the plant's health snapshot."""

    EVENT_TYPE = "plant.health_updated"

    def __init__(self, plant_id: int, user_id: int, metrics: Dict[str, Any], **kwargs):
        super().__init__(self.EVENT_TYPE, plant_id, user_id, {"metrics": metrics}, **kwargs)
