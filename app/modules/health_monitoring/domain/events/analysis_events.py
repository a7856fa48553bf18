# 📄 File: app/modules/health_monitoring/domain/events/analysis_events.py
# 🧭 Purpose (Layman Explanation):
# Event for a new plant check-up being saved
# 🧪 Purpose (Technical Summary):
# Analysis domain event, first in the ordered event list of record_analysis
# 🔗 Dependencies:
# app.shared.events.base
# 🔄 Connected Modules / Calls From:
# analysis_service.py

from app.shared.events.base import PlantEvent


class AnalysisRecorded(PlantEvent):
    EVENT_TYPE = "health.analysis_recorded"

    def __init__(
        self,
        analysis_id: int,
        plant_id: int,
        user_id: int,
        health_score: int,
        issue_count: int,
        recommendation_count: int,
        **kwargs
    ):
        data = {
            "analysis_id": analysis_id,
            "health_score": health_score,
            "issue_count": issue_count,
            "recommendation_count": recommendation_count,
        }
        kwargs.setdefault("category", "health")
        super().__init__(self.EVENT_TYPE, plant_id, user_id, data, **kwargs)

    @property
    def analysis_id(self) -> int:
        return self.data["analysis_id"]
