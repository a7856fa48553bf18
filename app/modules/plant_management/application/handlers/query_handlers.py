# 📄 File: app/modules/plant_management/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file fetches a user's plants for display.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers for plant reads; single-plant reads are restricted to the owner.
#
# 🔗 Dependencies:
# - app.modules.plant_management.application.queries (query definitions)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients

__all__ = [
    "ListPlantsQueryHandler",
    "GetPlantQueryHandler",
]

from typing import Any, Dict, List, Union

from app.modules.plant_management.application.queries.plant_queries import GetPlantQuery, ListPlantsQuery
from app.modules.plant_management.domain.models.plant import Plant
from app.shared.core.dependencies import HandlerBase


class ListPlantsQueryHandler(HandlerBase):
    async def handle(self, query: Union[ListPlantsQuery, Dict[str, Any]]) -> List[Plant]:
        query = self._parse(ListPlantsQuery, query)
        async with self._uow_factory() as uow:
            return await self._services(uow).plants.list_plants(query.user_id)


class GetPlantQueryHandler(HandlerBase):
    async def handle(self, query: Union[GetPlantQuery, Dict[str, Any]]) -> Plant:
        """
        Raises:
            PlantNotFoundError: If the plant does not exist
            AuthorizationError: If the plant belongs to another user
        """
        query = self._parse(GetPlantQuery, query)
        async with self._uow_factory() as uow:
            plant = await self._services(uow).plants.get_plant(query.plant_id)
            self._ensure_owner(plant, query.user_id, "plant")
            return plant
