# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how user accounts and their points and levels are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the users table with score constraints.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - Database migration scripts (schema generation)

"""
SQLAlchemy Models for User Management

Models:
- UserModel: Account credentials and gamification score
"""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, func

from app.shared.config.database import DatabaseBase


class UserModel(DatabaseBase):
    """
    SQLAlchemy model for user accounts.

    The id comes from the table's primary-key sequence; level and
    points carry check constraints mirroring the domain invariants.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    # Gamification score
    level = Column(Integer, nullable=False, default=1, server_default="1")
    points = Column(Integer, nullable=False, default=0, server_default="0")

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("level >= 1", name="level_positive"),
        CheckConstraint("points >= 0", name="points_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username='{self.username}', level={self.level})>"
