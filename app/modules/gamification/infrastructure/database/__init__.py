from .badge_repository_impl import BadgeRepositoryImpl
from .models import BadgeModel, UserBadgeModel

__all__ = [
    "BadgeModel",
    "UserBadgeModel",
    "BadgeRepositoryImpl",
]
