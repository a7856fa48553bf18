# 📄 File: app/modules/user_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file contains the "action processors" that sign up new users and hand out points,
# each one saving everything in one go.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers for user management write operations; each handle() runs in its own
# unit of work holding the user's aggregate lock, and events are published after commit.
#
# 🔗 Dependencies:
# - app.modules.user_management.application.commands (command definitions)
# - app.modules.user_management.domain.services (via DomainServices)
# - app.shared.core.dependencies (HandlerBase, unit of work factory)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients
# - app.bootstrap (demo garden seeding)

__all__ = [
    "RegisterUserCommandHandler",
    "GrantPointsCommandHandler",
]

import logging
from typing import Any, Dict, Union

from app.modules.user_management.application.commands.user_commands import GrantPointsCommand, RegisterUserCommand
from app.modules.user_management.domain.models.user import User
from app.shared.core.dependencies import HandlerBase

logger = logging.getLogger(__name__)


class RegisterUserCommandHandler(HandlerBase):
    """
    Handles user registration: uniqueness check, password hashing and event publishing.
    """

    async def handle(self, command: Union[RegisterUserCommand, Dict[str, Any]]) -> User:
        command = self._parse(RegisterUserCommand, command)
        logger.info(f"Starting registration for username: {command.username}")

        async with self._uow_factory() as uow:
            user = uow.collect(await self._services(uow).users.register_user(command.username, command.password))

        logger.info(f"Successfully registered user: {user.id}")
        return user


class GrantPointsCommandHandler(HandlerBase):
    """
    Handles point grants to the acting user.
    """

    async def handle(self, command: Union[GrantPointsCommand, Dict[str, Any]]) -> User:
        command = self._parse(GrantPointsCommand, command)

        async with self._uow_factory(users=[command.user_id]) as uow:
            return uow.collect(
                await self._services(uow).points.grant_points(command.user_id, command.amount, command.reason)
            )
