# 📄 File: app/modules/gamification/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how the badge catalog and each user's earned badges are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for badges (JSON requirements) and user_badges, unique per (user, badge).
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - badge_repository_impl.py (catalog and award operations)
# - Database migration scripts (schema generation)

"""
SQLAlchemy Models for Gamification

Models:
- BadgeModel: Static badge catalog
- UserBadgeModel: Badges earned by users
"""

from sqlalchemy import JSON, CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import relationship

from app.shared.config.database import DatabaseBase


class BadgeModel(DatabaseBase):
    """
    SQLAlchemy model for the badge catalog.
    """
    __tablename__ = "badges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=False)
    icon = Column(String(50), nullable=False)
    requirements = Column(JSON, nullable=False)
    points_bonus = Column(Integer, nullable=False, default=0, server_default="0")

    __table_args__ = (
        CheckConstraint("points_bonus >= 0", name="points_bonus_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<BadgeModel(id={self.id}, name='{self.name}')>"


class UserBadgeModel(DatabaseBase):
    """
    SQLAlchemy model for earned badges. A user holds each badge at most once.
    """
    __tablename__ = "user_badges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    badge_id = Column(Integer, ForeignKey("badges.id", ondelete="CASCADE"), nullable=False)
    earned_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    badge = relationship("BadgeModel", lazy="joined")

    __table_args__ = (
        UniqueConstraint("user_id", "badge_id", name="uq_user_badges_user_id_badge_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<UserBadgeModel(user_id={self.user_id}, badge_id={self.badge_id})>"
