# 📄 File: app/modules/gamification/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file fetches the badge list and the badges a user has earned.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers for the badge catalog and user badges.
#
# 🔗 Dependencies:
# - app.modules.gamification.application.queries (query definitions)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients

__all__ = [
    "ListBadgesQueryHandler",
    "ListUserBadgesQueryHandler",
]

from typing import Any, Dict, List, Union

from app.modules.gamification.application.queries.badge_queries import ListBadgesQuery, ListUserBadgesQuery
from app.modules.gamification.domain.models.badge import Badge, EarnedBadge
from app.shared.core.dependencies import HandlerBase


class ListBadgesQueryHandler(HandlerBase):
    async def handle(self, query: Union[ListBadgesQuery, Dict[str, Any]]) -> List[Badge]:
        self._parse(ListBadgesQuery, query)
        async with self._uow_factory() as uow:
            return await self._services(uow).badges.list_badges()


class ListUserBadgesQueryHandler(HandlerBase):
    async def handle(self, query: Union[ListUserBadgesQuery, Dict[str, Any]]) -> List[EarnedBadge]:
        query = self._parse(ListUserBadgesQuery, query)
        async with self._uow_factory() as uow:
            return await self._services(uow).badges.list_user_badges(query.user_id)
