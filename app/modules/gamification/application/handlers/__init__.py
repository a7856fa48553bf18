# 📄 File: app/modules/gamification/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the "action processors" for badges.
#
# 🧪 Purpose (Technical Summary):
# CQRS handlers for badge awards and badge listings.
#
# 🔗 Dependencies:
# - app.modules.gamification.application.commands / queries
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - API clients

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.gamification.application.handlers.command_handlers import AwardBadgeCommandHandler
    from app.modules.gamification.application.handlers.query_handlers import (
        ListBadgesQueryHandler,
        ListUserBadgesQueryHandler,
    )

__all__ = [
    "AwardBadgeCommandHandler",
    "ListBadgesQueryHandler",
    "ListUserBadgesQueryHandler",
]
