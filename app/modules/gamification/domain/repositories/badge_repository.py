# 📄 File: app/modules/gamification/domain/repositories/badge_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how the app looks up badges and remembers which users have earned which badges
# 🧪 Purpose (Technical Summary):
# Repository interface for the badge catalog and UserBadge award records
# 🔗 Dependencies:
# Badge domain models, typing, abc
# 🔄 Connected Modules / Calls From:
# badge_service.py, catalog seed, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.badge import Badge, EarnedBadge, UserBadge


class BadgeRepository(ABC):
    """
    Repository interface for badges and user badge awards.
    """

    @abstractmethod
    async def create(self, badge: Badge) -> Badge:
        """
        Add a badge to the catalog.

        Raises:
            DuplicateResourceError: If a badge with the same name exists
        """
        pass

    @abstractmethod
    async def get_by_id(self, badge_id: int) -> Optional[Badge]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Badge]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Badge]:
        """Get the whole catalog in seeding order."""
        pass

    @abstractmethod
    async def get_user_badge(self, user_id: int, badge_id: int) -> Optional[UserBadge]:
        pass

    @abstractmethod
    async def add_user_badge(self, user_badge: UserBadge) -> Optional[UserBadge]:
        """
        Record a badge award.

        Returns:
            The stored UserBadge, or None if the user already holds the badge

        Raises:
            DuplicateResourceError: If a concurrent writer stored the same award first
        """
        pass

    @abstractmethod
    async def list_user_badges(self, user_id: int) -> List[EarnedBadge]:
        """Get the user's badges with their earned_at, oldest award first."""
        pass
