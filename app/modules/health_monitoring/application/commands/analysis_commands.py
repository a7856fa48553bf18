# 📄 File: app/modules/health_monitoring/application/commands/analysis_commands.py
# 🧭 Purpose (Layman Explanation):
# The request for saving a plant check-up: the five health scores, the problems spotted and
# the suggested care actions
# 🧪 Purpose (Technical Summary):
# CQRS command definition for analysis ingestion with typed issue and recommendation payloads
# 🔗 Dependencies:
# pydantic, analysis domain payloads, app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.health_monitoring.application.handlers.command_handlers

from typing import List, Optional

from pydantic import Field

from app.modules.health_monitoring.domain.models.analysis import PlantIssue, Recommendation
from app.modules.plant_management.domain.models.plant import HealthMetrics
from app.shared.core.commands import Command


class RecordAnalysisCommand(Command):
    """
    Command for recording a plant analysis.

    Metric values are supplied by the caller; nothing here inspects
    the image.
    """

    plant_id: int = Field(..., gt=0)

    health_score: int = Field(..., ge=0, le=100)
    water_level: int = Field(..., ge=0, le=100)
    light_level: int = Field(..., ge=0, le=100)
    nutrient_level: int = Field(..., ge=0, le=100)
    pest_risk: int = Field(..., ge=0, le=100)

    issues: List[PlantIssue] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)
    image_url: Optional[str] = None

    @property
    def metrics(self) -> HealthMetrics:
        return HealthMetrics(
            health_score=self.health_score,
            water_level=self.water_level,
            light_level=self.light_level,
            nutrient_level=self.nutrient_level,
            pest_risk=self.pest_risk,
        )
