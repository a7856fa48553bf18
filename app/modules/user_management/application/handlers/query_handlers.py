# 📄 File: app/modules/user_management/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file looks up user accounts so the app can show points and levels.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers for user management read operations.
#
# 🔗 Dependencies:
# - app.modules.user_management.application.queries (query definitions)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients

__all__ = [
    "GetUserQueryHandler",
]

from typing import Any, Dict, Union

from app.modules.user_management.application.queries.user_queries import GetUserQuery
from app.modules.user_management.domain.models.user import User
from app.shared.core.dependencies import HandlerBase


class GetUserQueryHandler(HandlerBase):
    async def handle(self, query: Union[GetUserQuery, Dict[str, Any]]) -> User:
        """
        Raises:
            UserNotFoundError: If the user does not exist
        """
        query = self._parse(GetUserQuery, query)
        async with self._uow_factory() as uow:
            return await self._services(uow).users.get_user(query.user_id)
