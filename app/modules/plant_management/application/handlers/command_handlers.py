# 📄 File: app/modules/plant_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file contains the "action processors" for adding, editing and removing plants, making sure
# users only change their own plants.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers for plant lifecycle operations with ownership checks; each handle() runs in
# one unit of work holding the user and plant locks.
#
# 🔗 Dependencies:
# - app.modules.plant_management.application.commands (command definitions)
# - app.modules.plant_management.domain.services.plant_service (via DomainServices)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients
# - app.bootstrap (demo garden seeding)

__all__ = [
    "CreatePlantCommandHandler",
    "UpdatePlantCommandHandler",
    "DeletePlantCommandHandler",
]

import logging
from typing import Any, Dict, Union

from app.modules.plant_management.application.commands.plant_commands import (
    CreatePlantCommand,
    DeletePlantCommand,
    UpdatePlantCommand,
)
from app.modules.plant_management.domain.models.plant import Plant
from app.shared.core.dependencies import HandlerBase
from app.shared.core.exceptions import PlantNotFoundError

logger = logging.getLogger(__name__)


class CreatePlantCommandHandler(HandlerBase):
    """
    Handles plant creation, including the First Plant badge on a user's first plant.
    """

    async def handle(self, command: Union[CreatePlantCommand, Dict[str, Any]]) -> Plant:
        command = self._parse(CreatePlantCommand, command)

        async with self._uow_factory(users=[command.user_id]) as uow:
            plant = uow.collect(
                await self._services(uow).plants.create_plant(
                    command.user_id, command.name, command.species, command.image_url
                )
            )

        logger.info(f"Successfully created plant: {plant.id}")
        return plant


class UpdatePlantCommandHandler(HandlerBase):
    """
    Handles partial plant updates.
    """

    async def handle(self, command: Union[UpdatePlantCommand, Dict[str, Any]]) -> Plant:
        command = self._parse(UpdatePlantCommand, command)

        async with self._uow_factory(users=[command.user_id], plants=[command.plant_id]) as uow:
            services = self._services(uow)
            plant = await services.plants.get_plant(command.plant_id)
            self._ensure_owner(plant, command.user_id, "plant")

            if not command.has_updates():
                return plant
            return uow.collect(await services.plants.update_plant(command.plant_id, command.get_update_data()))


class DeletePlantCommandHandler(HandlerBase):
    """
    Handles plant deletion. The plant's tasks are deleted with it.
    """

    async def handle(self, command: Union[DeletePlantCommand, Dict[str, Any]]) -> bool:
        """
        Raises:
            PlantNotFoundError: If the plant does not exist (nothing is changed)
            AuthorizationError: If the acting user does not own the plant
        """
        command = self._parse(DeletePlantCommand, command)

        async with self._uow_factory(users=[command.user_id], plants=[command.plant_id]) as uow:
            plant = await uow.plants.get_by_id(command.plant_id)
            if plant is None:
                raise PlantNotFoundError(command.plant_id, user_id=command.user_id)
            self._ensure_owner(plant, command.user_id, "plant")

            return uow.collect(await self._services(uow).plants.delete_plant(command.plant_id))
