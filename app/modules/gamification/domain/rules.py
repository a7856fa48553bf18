# 📄 File: app/modules/gamification/domain/rules.py
# 🧭 Purpose (Layman Explanation):
# The list of every badge in the app, what it looks like, what it takes to earn it and how many
# bonus points it is worth
# 🧪 Purpose (Technical Summary):
# Static badge catalog seeded once into the badges table. Only First Plant and Hydration Pro
# have evaluation rules; the remaining badges are catalogued but permanently locked
# 🔗 Dependencies:
# badge.py requirement variants
# 🔄 Connected Modules / Calls From:
# gamification seed, plant_service.py (First Plant), task_generation_service.py (Hydration Pro)

from dataclasses import dataclass
from typing import Dict, List

from .models.badge import (
    Badge,
    BadgeRequirement,
    DaysCaringRequirement,
    HealthyPlantsRequirement,
    IssuesIdentifiedRequirement,
    PlantsAddedRequirement,
    PlantsRevivedRequirement,
    WateringCompletedRequirement,
)

FIRST_PLANT = "First Plant"
HYDRATION_PRO = "Hydration Pro"
PLANT_REVIVER = "Plant Reviver"
PLANT_EXPERT = "Plant Expert"
PLANT_PARENT = "Plant Parent"
DIAGNOSTICIAN = "Diagnostician"

# Completed water tasks needed for Hydration Pro
HYDRATION_PRO_WATERINGS = 5


@dataclass(frozen=True)
class BadgeDefinition:
    name: str
    description: str
    icon: str
    requirements: BadgeRequirement
    points_bonus: int = 0

    def to_badge(self) -> Badge:
        return Badge(
            name=self.name,
            description=self.description,
            icon=self.icon,
            requirements=self.requirements,
            points_bonus=self.points_bonus,
        )


BADGE_CATALOG: List[BadgeDefinition] = [
    BadgeDefinition(
        name=FIRST_PLANT,
        description="Added your first plant",
        icon="eco",
        requirements=PlantsAddedRequirement(count=1),
        points_bonus=25,
    ),
    BadgeDefinition(
        name=HYDRATION_PRO,
        description="Watered on time 5 times",
        icon="water_drop",
        requirements=WateringCompletedRequirement(count=HYDRATION_PRO_WATERINGS),
        points_bonus=50,
    ),
    BadgeDefinition(
        name=PLANT_REVIVER,
        description="Nurse a sick plant back to health",
        icon="healing",
        requirements=PlantsRevivedRequirement(count=1),
    ),
    BadgeDefinition(
        name=PLANT_EXPERT,
        description="Own 10 thriving plants",
        icon="auto_awesome",
        requirements=HealthyPlantsRequirement(count=10),
    ),
    BadgeDefinition(
        name=PLANT_PARENT,
        description="Care for plants for 30 days",
        icon="volunteer_activism",
        requirements=DaysCaringRequirement(count=30),
    ),
    BadgeDefinition(
        name=DIAGNOSTICIAN,
        description="Identify 5 plant issues",
        icon="query_stats",
        requirements=IssuesIdentifiedRequirement(count=5),
    ),
]

CATALOG_BY_NAME: Dict[str, BadgeDefinition] = {definition.name: definition for definition in BADGE_CATALOG}


def get_definition(name: str) -> BadgeDefinition:
    """
    Raises:
        KeyError: If the name is not in the catalog
    """
    return CATALOG_BY_NAME[name]
