# 📄 File: app/modules/gamification/application/queries/badge_queries.py
# 🧭 Purpose (Layman Explanation):
# The requests for the full badge list and for the badges a user has already earned
# 🧪 Purpose (Technical Summary):
# CQRS query definitions for badge reads
# 🔗 Dependencies:
# app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.gamification.application.handlers.query_handlers

from app.shared.core.commands import Query


class ListBadgesQuery(Query):
    """The whole badge catalog."""


class ListUserBadgesQuery(Query):
    """Badges earned by the acting user, with their earned_at."""
