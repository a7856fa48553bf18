# 📄 File: app/modules/user_management/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes all the "action processors" for user management, which take commands
# and queries and actually execute them by coordinating with the database and business logic.
#
# 🧪 Purpose (Technical Summary):
# Handlers package initialization implementing CQRS handler pattern for user management
# operations; each handler runs one unit of work per call.
#
# 🔗 Dependencies:
# - app.modules.user_management.application.commands (command definitions)
# - app.modules.user_management.application.queries (query definitions)
# - app.shared.core.dependencies (HandlerBase, domain service wiring)
#
# 🔄 Connected Modules / Calls From:
# - app.bootstrap (demo garden seeding)
# - API clients

"""
User Management Handlers

Command Handlers:
- RegisterUserCommandHandler: registration with password hashing
- GrantPointsCommandHandler: manual point grants

Query Handlers:
- GetUserQueryHandler: user lookup with derived level
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    # Command Handlers
    from app.modules.user_management.application.handlers.command_handlers import (
        GrantPointsCommandHandler,
        RegisterUserCommandHandler,
    )

    # Query Handlers
    from app.modules.user_management.application.handlers.query_handlers import (
        GetUserQueryHandler,
    )

__all__ = [
    # Command Handlers
    "RegisterUserCommandHandler",
    "GrantPointsCommandHandler",

    # Query Handlers
    "GetUserQueryHandler",
]
