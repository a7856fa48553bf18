# 📄 File: app/modules/notification_communication/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file contains the "action processor" that marks a user's notification as read.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handler for notification read receipts with an ownership check.
#
# 🔗 Dependencies:
# - app.modules.notification_communication.application.commands (command definitions)
# - app.modules.notification_communication.domain.services (via DomainServices)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients

__all__ = [
    "MarkNotificationReadCommandHandler",
]

from typing import Any, Dict, Union

from app.modules.notification_communication.application.commands.notification_commands import (
    MarkNotificationReadCommand,
)
from app.modules.notification_communication.domain.models.notification import Notification
from app.shared.core.dependencies import HandlerBase
from app.shared.core.exceptions import NotificationNotFoundError


class MarkNotificationReadCommandHandler(HandlerBase):
    async def handle(self, command: Union[MarkNotificationReadCommand, Dict[str, Any]]) -> Notification:
        """
        Raises:
            NotificationNotFoundError: If the notification does not exist
            AuthorizationError: If it belongs to another user
        """
        command = self._parse(MarkNotificationReadCommand, command)

        async with self._uow_factory(users=[command.user_id]) as uow:
            notification = await uow.notifications.get_by_id(command.notification_id)
            if notification is None:
                raise NotificationNotFoundError(command.notification_id)
            self._ensure_owner(notification, command.user_id, "notification")

            return uow.collect(await self._services(uow).notifications.mark_read(command.notification_id))
