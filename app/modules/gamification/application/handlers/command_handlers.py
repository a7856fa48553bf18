# 📄 File: app/modules/gamification/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# This file contains the "action processor" that gives out a badge the user has earned, never twice.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handler around BadgeService.try_award_badge, run in a unit of work holding
# the user's lock.
#
# 🔗 Dependencies:
# - app.modules.gamification.application.commands (command definitions)
# - app.modules.gamification.domain.services.badge_service (via DomainServices)
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - HTTP layer / API clients

__all__ = [
    "AwardBadgeCommandHandler",
]

from typing import Any, Dict, Optional, Union

from app.modules.gamification.application.commands.badge_commands import AwardBadgeCommand
from app.modules.gamification.domain.models.badge import UserBadge
from app.shared.core.dependencies import HandlerBase


class AwardBadgeCommandHandler(HandlerBase):
    async def handle(self, command: Union[AwardBadgeCommand, Dict[str, Any]]) -> Optional[UserBadge]:
        """
        Returns:
            The new UserBadge, or None if nothing was awarded

        Raises:
            BadgeNotFoundError: If the badge is not in the catalog
            UserNotFoundError: If the user does not exist
        """
        command = self._parse(AwardBadgeCommand, command)

        async with self._uow_factory(users=[command.user_id]) as uow:
            return uow.collect(
                await self._services(uow).badges.try_award_badge(command.user_id, command.badge_name)
            )
