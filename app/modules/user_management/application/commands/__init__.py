# 📄 File: app/modules/user_management/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the "change something" requests for users
# 🧪 Purpose (Technical Summary):
# Command definitions for user management write operations
# 🔗 Dependencies:
# pydantic, app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# Command handlers, API clients

from .user_commands import GrantPointsCommand, RegisterUserCommand

__all__ = [
    "RegisterUserCommand",
    "GrantPointsCommand",
]
