# 📄 File: app/modules/care_management/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file fetches care tasks for display, for the whole garden or a single plant.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers for task reads; plant-scoped reads are restricted to the plant owner.
#
# 🔗 Dependencies:
# - app.modules.care_management.application.queries (query definitions)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients

__all__ = [
    "ListTasksQueryHandler",
    "ListPlantTasksQueryHandler",
]

from typing import Any, Dict, List, Union

from app.modules.care_management.application.queries.task_queries import ListPlantTasksQuery, ListTasksQuery
from app.modules.care_management.domain.models.task import Task
from app.shared.core.dependencies import HandlerBase


class ListTasksQueryHandler(HandlerBase):
    async def handle(self, query: Union[ListTasksQuery, Dict[str, Any]]) -> List[Task]:
        query = self._parse(ListTasksQuery, query)
        async with self._uow_factory() as uow:
            return await uow.tasks.list_by_user(query.user_id)


class ListPlantTasksQueryHandler(HandlerBase):
    async def handle(self, query: Union[ListPlantTasksQuery, Dict[str, Any]]) -> List[Task]:
        """
        Raises:
            PlantNotFoundError: If the plant does not exist
            AuthorizationError: If the plant belongs to another user
        """
        query = self._parse(ListPlantTasksQuery, query)
        async with self._uow_factory() as uow:
            plant = await self._services(uow).plants.get_plant(query.plant_id)
            self._ensure_owner(plant, query.user_id, "plant")
            return await uow.tasks.list_by_plant(query.plant_id)
