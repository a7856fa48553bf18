# 📄 File: app/modules/plant_management/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the "action processors" for plants: adding, editing, removing and listing them.
#
# 🧪 Purpose (Technical Summary):
# CQRS handlers for plant management; writes lock the owning user and the plant.
#
# 🔗 Dependencies:
# - app.modules.plant_management.application.commands / queries
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - app.bootstrap (demo garden seeding)
# - API clients

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.plant_management.application.handlers.command_handlers import (
        CreatePlantCommandHandler,
        DeletePlantCommandHandler,
        UpdatePlantCommandHandler,
    )
    from app.modules.plant_management.application.handlers.query_handlers import (
        GetPlantQueryHandler,
        ListPlantsQueryHandler,
    )

__all__ = [
    "CreatePlantCommandHandler",
    "UpdatePlantCommandHandler",
    "DeletePlantCommandHandler",
    "ListPlantsQueryHandler",
    "GetPlantQueryHandler",
]
