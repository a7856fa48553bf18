# 📄 File: app/modules/notification_communication/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file fetches a user's notifications, newest first.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handler for notification reads.
#
# 🔗 Dependencies:
# - app.modules.notification_communication.application.queries (query definitions)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients

__all__ = [
    "ListNotificationsQueryHandler",
]

from typing import Any, Dict, List, Union

from app.modules.notification_communication.application.queries.notification_queries import (
    ListNotificationsQuery,
)
from app.modules.notification_communication.domain.models.notification import Notification
from app.shared.core.dependencies import HandlerBase


class ListNotificationsQueryHandler(HandlerBase):
    async def handle(self, query: Union[ListNotificationsQuery, Dict[str, Any]]) -> List[Notification]:
        query = self._parse(ListNotificationsQuery, query)
        async with self._uow_factory() as uow:
            return await uow.notifications.list_by_user(query.user_id)
