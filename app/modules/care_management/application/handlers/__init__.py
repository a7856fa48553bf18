# 📄 File: app/modules/care_management/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the "action processors" for care tasks.
#
# 🧪 Purpose (Technical Summary):
# CQRS handlers for task management; completing a task runs its rewards in the same transaction.
#
# 🔗 Dependencies:
# - app.modules.care_management.application.commands / queries
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - app.bootstrap (demo garden seeding)
# - API clients

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.care_management.application.handlers.command_handlers import (
        CreateTaskCommandHandler,
        DeleteTaskCommandHandler,
        UpdateTaskCommandHandler,
    )
    from app.modules.care_management.application.handlers.query_handlers import (
        ListPlantTasksQueryHandler,
        ListTasksQueryHandler,
    )

__all__ = [
    "CreateTaskCommandHandler",
    "UpdateTaskCommandHandler",
    "DeleteTaskCommandHandler",
    "ListTasksQueryHandler",
    "ListPlantTasksQueryHandler",
]
