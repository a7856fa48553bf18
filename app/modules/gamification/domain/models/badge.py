# 📄 File: app/modules/gamification/domain/models/badge.py
# 🧭 Purpose (Layman Explanation):
# Defines the badges users can earn (like "First Plant" or "Hydration Pro"), what it takes to earn
# each one, and the record that a particular user has earned a particular badge
# 🧪 Purpose (Technical Summary):
# Badge catalog entity with typed requirements (a discriminated union on `kind`), the
# BadgeProgress snapshot requirements are evaluated against, and the UserBadge award record
# 🔗 Dependencies:
# pydantic (discriminated unions, TypeAdapter), datetime, typing
# 🔄 Connected Modules / Calls From:
# rules.py, badge_service.py, badge_repository.py, gamification handlers

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from app.shared.utils.helpers import utc_now


class RequirementKind(str, Enum):
    """What a badge requirement counts."""
    PLANTS_ADDED = "plants_added"
    WATERING_COMPLETED = "watering_completed"
    PLANTS_REVIVED = "plants_revived"
    HEALTHY_PLANTS = "healthy_plants"
    DAYS_CARING = "days_caring"
    ISSUES_IDENTIFIED = "issues_identified"


class BadgeProgress(BaseModel):
    """
    Snapshot of a user's achievements, gathered by the code path that
    checks a badge. Counters nobody gathered stay at zero.
    """

    plants_added: int = Field(default=0, ge=0)
    watering_completed: int = Field(default=0, ge=0)
    plants_revived: int = Field(default=0, ge=0)
    healthy_plants: int = Field(default=0, ge=0)
    days_caring: int = Field(default=0, ge=0)
    issues_identified: int = Field(default=0, ge=0)


class _CountRequirement(BaseModel):
    """Requirement reached once a progress counter hits `count`."""

    model_config = ConfigDict(frozen=True)

    # Badges whose requirement has no evaluation rule stay locked
    evaluable: ClassVar[bool] = True

    count: int = Field(..., gt=0)

    def progress_value(self, progress: BadgeProgress) -> int:
        return getattr(progress, self.kind)

    def is_satisfied(self, progress: BadgeProgress) -> bool:
        if not self.evaluable:
            return False
        return self.progress_value(progress) >= self.count


class PlantsAddedRequirement(_CountRequirement):
    kind: Literal["plants_added"] = "plants_added"


class WateringCompletedRequirement(_CountRequirement):
    kind: Literal["watering_completed"] = "watering_completed"


class PlantsRevivedRequirement(_CountRequirement):
    evaluable: ClassVar[bool] = False
    kind: Literal["plants_revived"] = "plants_revived"


class HealthyPlantsRequirement(_CountRequirement):
    evaluable: ClassVar[bool] = False
    kind: Literal["healthy_plants"] = "healthy_plants"


class DaysCaringRequirement(_CountRequirement):
    evaluable: ClassVar[bool] = False
    kind: Literal["days_caring"] = "days_caring"


class IssuesIdentifiedRequirement(_CountRequirement):
    evaluable: ClassVar[bool] = False
    kind: Literal["issues_identified"] = "issues_identified"


BadgeRequirement = Annotated[
    Union[
        PlantsAddedRequirement,
        WateringCompletedRequirement,
        PlantsRevivedRequirement,
        HealthyPlantsRequirement,
        DaysCaringRequirement,
        IssuesIdentifiedRequirement,
    ],
    Field(discriminator="kind"),
]

requirement_adapter: TypeAdapter = TypeAdapter(BadgeRequirement)


def parse_requirement(data: Dict[str, Any]) -> BadgeRequirement:
    """Build a typed requirement from its stored JSON form."""
    return requirement_adapter.validate_python(data)


class Badge(BaseModel):
    """
    Badge catalog entry.

    Fields:
    - id (int): Datastore-assigned identifier
    - name (str): Unique badge name
    - description / icon: Display data
    - requirements: Typed requirement variant
    - points_bonus (int): Points granted when the badge is earned
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=100)
    description: str
    icon: str
    requirements: BadgeRequirement
    points_bonus: int = Field(default=0, ge=0)

    @property
    def is_evaluable(self) -> bool:
        return self.requirements.evaluable

    def requirement_met(self, progress: BadgeProgress) -> bool:
        return self.requirements.is_satisfied(progress)


class UserBadge(BaseModel):
    """Record that a user has earned a badge. At most one per (user, badge)."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    user_id: int
    badge_id: int
    earned_at: datetime = Field(default_factory=utc_now)


class EarnedBadge(BaseModel):
    """A badge together with the moment the user earned it."""

    badge: Badge
    earned_at: datetime
