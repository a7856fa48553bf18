# 📄 File: app/modules/health_monitoring/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the "action processors" for recording and reading plant check-ups.
#
# 🧪 Purpose (Technical Summary):
# CQRS handlers for plant analyses.
#
# 🔗 Dependencies:
# - app.modules.health_monitoring.application.commands / queries
# - app.shared.core.dependencies (HandlerBase)
#
# 🔄 Connected Modules / Calls From:
# - app.bootstrap (demo garden seeding)
# - API clients

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.health_monitoring.application.handlers.command_handlers import (
        RecordAnalysisCommandHandler,
    )
    from app.modules.health_monitoring.application.handlers.query_handlers import (
        GetLatestAnalysisQueryHandler,
        ListAnalysesQueryHandler,
    )

__all__ = [
    "RecordAnalysisCommandHandler",
    "ListAnalysesQueryHandler",
    "GetLatestAnalysisQueryHandler",
]
