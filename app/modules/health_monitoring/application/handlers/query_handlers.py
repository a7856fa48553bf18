# 📄 File: app/modules/health_monitoring/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file fetches a plant's check-up history and its most recent check-up.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers for analysis reads, restricted to the plant owner.
#
# 🔗 Dependencies:
# - app.modules.health_monitoring.application.queries (query definitions)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients

__all__ = [
    "ListAnalysesQueryHandler",
    "GetLatestAnalysisQueryHandler",
]

from typing import Any, Dict, List, Union

from app.modules.health_monitoring.application.queries.analysis_queries import (
    GetLatestAnalysisQuery,
    ListAnalysesQuery,
)
from app.modules.health_monitoring.domain.models.analysis import PlantAnalysis
from app.shared.core.dependencies import HandlerBase


class ListAnalysesQueryHandler(HandlerBase):
    async def handle(self, query: Union[ListAnalysesQuery, Dict[str, Any]]) -> List[PlantAnalysis]:
        query = self._parse(ListAnalysesQuery, query)
        async with self._uow_factory() as uow:
            services = self._services(uow)
            plant = await services.plants.get_plant(query.plant_id)
            self._ensure_owner(plant, query.user_id, "plant")
            return await services.analyses.list_analyses(query.plant_id)


class GetLatestAnalysisQueryHandler(HandlerBase):
    async def handle(self, query: Union[GetLatestAnalysisQuery, Dict[str, Any]]) -> PlantAnalysis:
        """
        Raises:
            PlantNotFoundError: If the plant does not exist
            AnalysisNotFoundError: If the plant has no analysis yet
        """
        query = self._parse(GetLatestAnalysisQuery, query)
        async with self._uow_factory() as uow:
            services = self._services(uow)
            plant = await services.plants.get_plant(query.plant_id)
            self._ensure_owner(plant, query.user_id, "plant")
            return await services.analyses.get_latest_analysis(query.plant_id)
