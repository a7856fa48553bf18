# 📄 File: app/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is in our plant care app - their name, password and how many points
# and levels they have earned by looking after their plants
# 🧪 Purpose (Technical Summary):
# Domain model for the User entity holding credentials and the gamification score,
# with the level invariant level == points // POINTS_PER_LEVEL + 1 enforced on every grant
# 🔗 Dependencies:
# pydantic, datetime, typing, app.shared.core.security
# 🔄 Connected Modules / Calls From:
# points_service.py, user_repository.py, user application handlers

from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.core.security import get_password_hash, verify_password
from app.shared.utils.helpers import utc_now

DEFAULT_POINTS_PER_LEVEL = 100


def level_for_points(points: int, points_per_level: int = DEFAULT_POINTS_PER_LEVEL) -> int:
    """Level reached with the given points: one level per full block, starting at 1."""
    return points // points_per_level + 1


class User(BaseModel):
    """
    User domain model representing a plant care application user.

    Fields:
    - id (int): Datastore-assigned identifier (None until persisted)
    - username (str): Unique login name
    - password_hash (str): Hashed password, never the plain text
    - level (int): Gamification level, at least 1
    - points (int): Gamification points, never negative
    """

    model_config = ConfigDict(validate_assignment=True, from_attributes=True)

    id: Optional[int] = None
    username: str = Field(..., min_length=1, max_length=50)
    password_hash: str
    level: int = Field(default=1, ge=1)
    points: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v: str) -> str:
        username = v.strip()
        if not username:
            raise ValueError('Username is required')
        return username

    @field_validator('password_hash')
    @classmethod
    def validate_password_hash(cls, v: str) -> str:
        """Validate password hash exists"""
        if not v:
            raise ValueError('Password hash is required')
        return v

    @classmethod
    def create_new_user(cls, username: str, password: str) -> "User":
        """
        Create a new user at level 1 with no points.

        Args:
            username: Unique login name
            password: Plain text password (will be hashed)

        Returns:
            New User instance
        """
        return cls(
            username=username,
            password_hash=get_password_hash(password),
        )

    def verify_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    def grant_points(self, amount: int, points_per_level: int = DEFAULT_POINTS_PER_LEVEL) -> Tuple[int, int]:
        """
        Add points and raise the level when the new total reaches a higher one.

        The level never goes down, even if points_per_level changed
        between grants.

        Args:
            amount: Non-negative number of points to add
            points_per_level: Points per level step

        Returns:
            Tuple of (previous level, current level)
        """
        if amount < 0:
            raise ValueError("Points amount cannot be negative")

        previous_level = self.level
        self.points += amount
        new_level = level_for_points(self.points, points_per_level)
        if new_level > self.level:
            self.level = new_level
        return previous_level, self.level
