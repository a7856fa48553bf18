# 📄 File: app/modules/care_management/application/queries/task_queries.py
# 🧭 Purpose (Layman Explanation):
# The requests for showing a user's to-do list, overall or for one plant
# 🧪 Purpose (Technical Summary):
# CQRS query definitions for task reads
# 🔗 Dependencies:
# pydantic, app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.application.handlers.query_handlers

from pydantic import Field

from app.shared.core.commands import Query


class ListTasksQuery(Query):
    """All tasks of the acting user, soonest due first."""


class ListPlantTasksQuery(Query):
    plant_id: int = Field(..., gt=0)
