# 📄 File: app/modules/gamification/application/commands/badge_commands.py
# 🧭 Purpose (Layman Explanation):
# The request for giving a user a badge they have earned
# 🧪 Purpose (Technical Summary):
# CQRS command definition for explicit badge awards
# 🔗 Dependencies:
# pydantic, app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.gamification.application.handlers.command_handlers

from pydantic import Field

from app.shared.core.commands import Command


class AwardBadgeCommand(Command):
    """
    Award a catalog badge to the acting user.

    The requirement is checked against the user's stored plants and tasks;
    the caller cannot supply its own progress.
    """

    badge_name: str = Field(..., min_length=1, max_length=100)
