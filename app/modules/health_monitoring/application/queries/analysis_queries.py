# 📄 File: app/modules/health_monitoring/application/queries/analysis_queries.py
# 🧭 Purpose (Layman Explanation):
# The requests for a plant's check-up history and its latest check-up
# 🧪 Purpose (Technical Summary):
# CQRS query definitions for analysis reads
# 🔗 Dependencies:
# pydantic, app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.health_monitoring.application.handlers.query_handlers

from pydantic import Field

from app.shared.core.commands import Query


class ListAnalysesQuery(Query):
    """A plant's analyses, newest first."""

    plant_id: int = Field(..., gt=0)


class GetLatestAnalysisQuery(Query):
    plant_id: int = Field(..., gt=0)
