from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.notification_communication.application.handlers.command_handlers import (
        MarkNotificationReadCommandHandler,
    )
    from app.modules.notification_communication.application.handlers.query_handlers import (
        ListNotificationsQueryHandler,
    )

__all__ = [
    "MarkNotificationReadCommandHandler",
    "ListNotificationsQueryHandler",
]
