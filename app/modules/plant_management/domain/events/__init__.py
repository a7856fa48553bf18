# 📄 File: app/modules/plant_management/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the announcements made when plants are added, changed, removed or re-assessed
# 🧪 Purpose (Technical Summary):
# Package initialization for plant domain events
# 🔗 Dependencies:
# app.shared.events
# 🔄 Connected Modules / Calls From:
# PlantService, unit of work

from .plant_events import PlantCreated, PlantDeleted, PlantHealthUpdated, PlantUpdated

__all__ = [
    "PlantCreated",
    "PlantUpdated",
    "PlantDeleted",
    "PlantHealthUpdated",
]
