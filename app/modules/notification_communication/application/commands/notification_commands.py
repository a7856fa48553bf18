# 📄 File: app/modules/notification_communication/application/commands/notification_commands.py
# 🧭 Purpose (Layman Explanation):
# The request for marking a notification as read
# 🧪 Purpose (Technical Summary):
# CQRS command definition for the only notification mutation
# 🔗 Dependencies:
# pydantic, app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.notification_communication.application.handlers.command_handlers

from pydantic import Field

from app.shared.core.commands import Command


class MarkNotificationReadCommand(Command):
    notification_id: int = Field(..., gt=0)
