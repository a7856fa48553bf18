from .badge import (
    Badge,
    BadgeProgress,
    DaysCaringRequirement,
    EarnedBadge,
    HealthyPlantsRequirement,
    IssuesIdentifiedRequirement,
    PlantsAddedRequirement,
    PlantsRevivedRequirement,
    RequirementKind,
    UserBadge,
    WateringCompletedRequirement,
    parse_requirement,
)

__all__ = [
    "Badge",
    "UserBadge",
    "EarnedBadge",
    "BadgeProgress",
    "RequirementKind",
    "PlantsAddedRequirement",
    "WateringCompletedRequirement",
    "PlantsRevivedRequirement",
    "HealthyPlantsRequirement",
    "DaysCaringRequirement",
    "IssuesIdentifiedRequirement",
    "parse_requirement",
]
