# 📄 File: app/modules/gamification/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the badge rules: which badges exist and what earns them
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting badge models, the requirement union, the built-in
# catalog definitions, events and the repository interface
# 🔗 Dependencies:
# Domain models, rules, repositories, events
# 🔄 Connected Modules / Calls From:
# Application layer, infrastructure layer, PlantService, TaskGenerationService

from .models.badge import Badge, BadgeProgress, EarnedBadge, UserBadge, parse_requirement
from .rules import FIRST_PLANT, HYDRATION_PRO, BadgeDefinition, get_definition
from .repositories.badge_repository import BadgeRepository
from .events.badge_events import BadgeEarned

__all__ = [
    "Badge",
    "BadgeProgress",
    "EarnedBadge",
    "UserBadge",
    "parse_requirement",
    "BadgeDefinition",
    "get_definition",
    "FIRST_PLANT",
    "HYDRATION_PRO",
    "BadgeRepository",
    "BadgeEarned",
]
