# 📄 File: app/modules/plant_management/application/queries/plant_queries.py
# 🧭 Purpose (Layman Explanation):
# The requests for showing a user's garden or a single plant
# 🧪 Purpose (Technical Summary):
# CQRS query definitions for plant reads
# 🔗 Dependencies:
# pydantic, app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.plant_management.application.handlers.query_handlers

from pydantic import Field

from app.shared.core.commands import Query


class ListPlantsQuery(Query):
    """All plants of the acting user, oldest first."""


class GetPlantQuery(Query):
    plant_id: int = Field(..., gt=0)
