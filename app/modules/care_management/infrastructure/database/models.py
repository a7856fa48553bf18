# 📄 File: app/modules/care_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how care tasks are stored in the database, tied to the plant they belong to.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the tasks table; rows are removed with their plant (ON DELETE CASCADE).
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - task_repository_impl.py (CRUD operations)
# - Database migration scripts (schema generation)

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, Text, false, func

from app.shared.config.database import DatabaseBase


class TaskModel(DatabaseBase):
    """
    SQLAlchemy model for care tasks.
    """
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(Integer, ForeignKey("plants.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(50), nullable=False)
    priority = Column(String(20), nullable=False, default="medium", server_default="medium")
    completed = Column(Boolean, nullable=False, default=False, server_default=false())

    due_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("priority IN ('urgent', 'high', 'medium', 'low')", name="priority"),
        Index("ix_tasks_user_id_type_completed", "user_id", "type", "completed"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<TaskModel(id={self.id}, plant_id={self.plant_id}, type='{self.type}', completed={self.completed})>"
