# 📄 File: app/modules/plant_management/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "plant" is in our app - its name and species, and the latest health snapshot
# (how healthy, how thirsty, how much light and food it gets, and how likely pests are)
# 🧪 Purpose (Technical Summary):
# Domain model for the Plant entity and the HealthMetrics value object shared with analyses;
# health fields are bounded to 0-100 and replaced wholesale by each new analysis
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# plant_service.py, plant_repository.py, analysis_service.py, plant application handlers

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.helpers import utc_now

HEALTH_FIELDS = ("health_score", "water_level", "light_level", "nutrient_level", "pest_risk")


class HealthMetrics(BaseModel):
    """
    Five health metrics produced by a plant analysis.

    All values are integers between 0 and 100; pest_risk is a risk,
    so higher is worse.
    """

    model_config = ConfigDict(frozen=True)

    health_score: int = Field(..., ge=0, le=100)
    water_level: int = Field(..., ge=0, le=100)
    light_level: int = Field(..., ge=0, le=100)
    nutrient_level: int = Field(..., ge=0, le=100)
    pest_risk: int = Field(..., ge=0, le=100)


class Plant(BaseModel):
    """
    Plant domain model owned by a single user.

    Fields:
    - id (int): Datastore-assigned identifier (None until persisted)
    - user_id (int): Owner
    - name / species / image_url: Descriptive data
    - health_score, water_level, light_level, nutrient_level (0-100, default 100)
    - pest_risk (0-100, default 0)
    - last_watered / last_fertilized: Care timestamps
    """

    model_config = ConfigDict(validate_assignment=True, from_attributes=True)

    id: Optional[int] = None
    user_id: int
    name: str = Field(..., min_length=1, max_length=100)
    species: Optional[str] = Field(None, max_length=100)
    image_url: Optional[str] = None

    # Health snapshot
    health_score: int = Field(default=100, ge=0, le=100)
    water_level: int = Field(default=100, ge=0, le=100)
    light_level: int = Field(default=100, ge=0, le=100)
    nutrient_level: int = Field(default=100, ge=0, le=100)
    pest_risk: int = Field(default=0, ge=0, le=100)

    last_watered: Optional[datetime] = None
    last_fertilized: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        name = v.strip()
        if not name:
            raise ValueError('Plant name is required')
        return name

    @classmethod
    def create_new_plant(
        cls,
        user_id: int,
        name: str,
        species: Optional[str] = None,
        image_url: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "Plant":
        """
        Create a freshly added plant: full health, no pests, just watered and fed.
        """
        now = now or utc_now()
        return cls(
            user_id=user_id,
            name=name,
            species=species,
            image_url=image_url,
            last_watered=now,
            last_fertilized=now,
            created_at=now,
        )

    @property
    def health_metrics(self) -> HealthMetrics:
        return HealthMetrics(**{field: getattr(self, field) for field in HEALTH_FIELDS})

    def apply_health_snapshot(self, metrics: HealthMetrics) -> None:
        """Overwrite all five health fields with the analysis result."""
        for field in HEALTH_FIELDS:
            setattr(self, field, getattr(metrics, field))

    def apply_changes(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial update.

        Returns:
            Dict of the fields whose value actually changed
        """
        changed = {}
        for field, value in changes.items():
            if field in ("id", "user_id", "created_at"):
                continue
            previous = getattr(self, field)
            setattr(self, field, value)
            if getattr(self, field) != previous:
                changed[field] = getattr(self, field)
        return changed

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id
