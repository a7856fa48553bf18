# 📄 File: app/modules/plant_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules for plants and their health numbers
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting the Plant entity, events and repository interface
# 🔗 Dependencies:
# Domain models, repositories, events from subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, infrastructure layer, other modules' domain services

from .models.plant import HEALTH_FIELDS, HealthMetrics, Plant
from .repositories.plant_repository import PlantRepository
from .events.plant_events import PlantCreated, PlantDeleted, PlantHealthUpdated, PlantUpdated

__all__ = [
    "Plant",
    "HealthMetrics",
    "HEALTH_FIELDS",
    "PlantRepository",
    "PlantCreated",
    "PlantUpdated",
    "PlantDeleted",
    "PlantHealthUpdated",
]
