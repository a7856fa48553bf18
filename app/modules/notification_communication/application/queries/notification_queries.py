# 📄 File: app/modules/notification_communication/application/queries/notification_queries.py
# 🧭 Purpose (Layman Explanation):
# The request for a user's notification list
# 🧪 Purpose (Technical Summary):
# CQRS query definition for notification reads
# 🔗 Dependencies:
# app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.notification_communication.application.handlers.query_handlers

from app.shared.core.commands import Query


class ListNotificationsQuery(Query):
    """Notifications of the acting user, newest first."""
