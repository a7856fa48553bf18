# 📄 File: app/modules/health_monitoring/domain/models/analysis.py
# 🧭 Purpose (Layman Explanation):
# Defines a plant health check-up: the five health scores, any problems spotted (like dehydration)
# and the recommended actions (like "water thoroughly") that come out of it
# 🧪 Purpose (Technical Summary):
# Append-only PlantAnalysis entity with typed issue and recommendation payloads validated by pydantic
# 🔗 Dependencies:
# pydantic, datetime, enum, plant_management HealthMetrics
# 🔄 Connected Modules / Calls From:
# analysis_service.py, analysis_repository.py, task_generation_service.py, notification_service.py

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.modules.plant_management.domain.models.plant import HEALTH_FIELDS, HealthMetrics
from app.shared.utils.helpers import utc_now


class RecommendationPriority(str, Enum):
    """How pressing a recommended action is."""
    URGENT = "urgent"
    RECOMMENDED = "recommended"
    MAINTENANCE = "maintenance"


class PlantIssue(BaseModel):
    """A problem detected by an analysis, e.g. dehydration."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str
    icon: str = ""


class Recommendation(BaseModel):
    """
    An action suggested by an analysis.

    `type` is the care-task type the action maps to (water, fertilize,
    clean, repot, ...); `tip` is an optional extra hint for the user.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    title: str = Field(..., min_length=1)
    description: str
    priority: RecommendationPriority
    type: str = Field(..., min_length=1)
    icon: str = ""
    tip: Optional[str] = None

    @field_validator('type')
    @classmethod
    def normalize_type(cls, v: str) -> str:
        return v.strip().lower()


class PlantAnalysis(BaseModel):
    """
    Plant analysis record. Never updated after insertion.

    The latest analysis of a plant is the one with the greatest
    created_at, ties going to the higher id.
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    plant_id: int
    user_id: int

    health_score: int = Field(..., ge=0, le=100)
    water_level: int = Field(..., ge=0, le=100)
    light_level: int = Field(..., ge=0, le=100)
    nutrient_level: int = Field(..., ge=0, le=100)
    pest_risk: int = Field(..., ge=0, le=100)

    issues: List[PlantIssue] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)
    image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_metrics(
        cls,
        plant_id: int,
        user_id: int,
        metrics: HealthMetrics,
        issues: List[PlantIssue],
        recommendations: List[Recommendation],
        image_url: Optional[str] = None,
    ) -> "PlantAnalysis":
        return cls(
            plant_id=plant_id,
            user_id=user_id,
            issues=list(issues),
            recommendations=list(recommendations),
            image_url=image_url,
            **metrics.model_dump(),
        )

    @property
    def metrics(self) -> HealthMetrics:
        return HealthMetrics(**{field: getattr(self, field) for field in HEALTH_FIELDS})
