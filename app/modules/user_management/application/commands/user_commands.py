# 📄 File: app/modules/user_management/application/commands/user_commands.py
# 🧭 Purpose (Layman Explanation):
# The requests for signing up a new user and for giving a user points
# 🧪 Purpose (Technical Summary):
# CQRS command definitions for registration and manual point grants, validated by pydantic
# 🔗 Dependencies:
# pydantic, app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.application.handlers.command_handlers

"""
User Commands

Command Fields:
- RegisterUserCommand: username (1-50 chars), password (non-empty)
- GrantPointsCommand: user_id, amount (non-negative), reason
"""

from pydantic import BaseModel, ConfigDict, Field

from app.shared.core.commands import Command


class RegisterUserCommand(BaseModel):
    """
    Command for registering a new account. There is no acting user yet.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    username: str = Field(..., min_length=1, max_length=50, description="Unique login name")
    password: str = Field(..., min_length=1, max_length=128, description="Raw password (will be hashed)")


class GrantPointsCommand(Command):
    """Command for adding points to the acting user."""

    amount: int = Field(..., ge=0, description="Points to add")
    reason: str = Field(default="", max_length=100, description="Label recorded on the event")
