# 📄 File: app/modules/user_management/application/queries/user_queries.py
# 🧭 Purpose (Layman Explanation):
# The request for looking up a user's account with their points and level
# 🧪 Purpose (Technical Summary):
# CQRS query definitions for user reads
# 🔗 Dependencies:
# app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.application.handlers.query_handlers

from app.shared.core.commands import Query


class GetUserQuery(Query):
    """Query for the acting user's own account."""
