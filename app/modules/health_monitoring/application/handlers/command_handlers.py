# 📄 File: app/modules/health_monitoring/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file contains the "action processor" that saves a plant check-up and everything that
# follows from it, all at once or not at all.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handler for analysis ingestion; the whole pipeline runs in one unit of work
# holding the user and plant locks, and its ordered events are published only after commit.
#
# 🔗 Dependencies:
# - app.modules.health_monitoring.application.commands (command definitions)
# - app.modules.health_monitoring.domain.services.analysis_service (via DomainServices)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients
# - app.bootstrap (demo garden seeding)

__all__ = [
    "RecordAnalysisCommandHandler",
]

import logging
from typing import Any, Dict, Union

from app.modules.health_monitoring.application.commands.analysis_commands import RecordAnalysisCommand
from app.modules.health_monitoring.domain.models.analysis import PlantAnalysis
from app.shared.core.dependencies import HandlerBase

logger = logging.getLogger(__name__)


class RecordAnalysisCommandHandler(HandlerBase):
    """
    Handles analysis recording for a plant the acting user owns.
    """

    async def handle(self, command: Union[RecordAnalysisCommand, Dict[str, Any]]) -> PlantAnalysis:
        """
        Raises:
            PlantNotFoundError: If the plant does not exist
            AuthorizationError: If the plant belongs to another user
        """
        command = self._parse(RecordAnalysisCommand, command)
        logger.info(f"Recording analysis for plant {command.plant_id}")

        async with self._uow_factory(users=[command.user_id], plants=[command.plant_id]) as uow:
            services = self._services(uow)
            plant = await services.plants.get_plant(command.plant_id)
            self._ensure_owner(plant, command.user_id, "plant")

            analysis = uow.collect(
                await services.analyses.record_analysis(
                    plant_id=command.plant_id,
                    user_id=command.user_id,
                    metrics=command.metrics,
                    issues=command.issues,
                    recommendations=command.recommendations,
                    image_url=command.image_url,
                )
            )

        logger.info(f"Successfully recorded analysis: {analysis.id}")
        return analysis
