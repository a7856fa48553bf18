# 📄 File: app/modules/care_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file contains the "action processors" for care tasks: adding one, editing or finishing it
# (which earns points and maybe a badge) and deleting it.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers for task operations with ownership checks; the completion trigger runs
# inside the same unit of work as the update that caused it.
#
# 🔗 Dependencies:
# - app.modules.care_management.application.commands (command definitions)
# - app.modules.care_management.domain.services (via DomainServices)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients
# - app.bootstrap (demo garden seeding)

__all__ = [
    "CreateTaskCommandHandler",
    "UpdateTaskCommandHandler",
    "DeleteTaskCommandHandler",
]

import logging
from typing import Any, Dict, Union

from app.modules.care_management.application.commands.task_commands import (
    CreateTaskCommand,
    DeleteTaskCommand,
    UpdateTaskCommand,
)
from app.modules.care_management.domain.models.task import Task
from app.shared.core.dependencies import HandlerBase

logger = logging.getLogger(__name__)


class CreateTaskCommandHandler(HandlerBase):
    async def handle(self, command: Union[CreateTaskCommand, Dict[str, Any]]) -> Task:
        """
        Raises:
            PlantNotFoundError: If the plant does not exist
            AuthorizationError: If the plant belongs to another user
        """
        command = self._parse(CreateTaskCommand, command)

        async with self._uow_factory(users=[command.user_id], plants=[command.plant_id]) as uow:
            services = self._services(uow)
            plant = await services.plants.get_plant(command.plant_id)
            self._ensure_owner(plant, command.user_id, "plant")

            return uow.collect(
                await services.tasks.create_task(
                    plant_id=command.plant_id,
                    user_id=command.user_id,
                    title=command.title,
                    task_type=command.type,
                    description=command.description,
                    priority=command.priority,
                    due_date=command.due_date,
                )
            )


class UpdateTaskCommandHandler(HandlerBase):
    """
    Handles task updates, running the completion trigger on the first completion.
    """

    async def handle(self, command: Union[UpdateTaskCommand, Dict[str, Any]]) -> Task:
        """
        Raises:
            TaskNotFoundError: If the task does not exist
            AuthorizationError: If the task belongs to another user
            InvalidStateError: If the update reopens a completed task
        """
        command = self._parse(UpdateTaskCommand, command)

        async with self._uow_factory(users=[command.user_id]) as uow:
            services = self._services(uow)
            task = await services.tasks.get_task(command.task_id)
            self._ensure_owner(task, command.user_id, "task")

            task = uow.collect(await services.tasks.update_task(command.task_id, command.get_update_data()))

        logger.debug(f"Updated task {task.id} (completed={task.completed})")
        return task


class DeleteTaskCommandHandler(HandlerBase):
    async def handle(self, command: Union[DeleteTaskCommand, Dict[str, Any]]) -> bool:
        command = self._parse(DeleteTaskCommand, command)

        async with self._uow_factory(users=[command.user_id]) as uow:
            services = self._services(uow)
            task = await services.tasks.get_task(command.task_id)
            self._ensure_owner(task, command.user_id, "task")

            return uow.collect(await services.tasks.delete_task(command.task_id))
