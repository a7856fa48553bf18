# 📄 File: app/modules/notification_communication/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how user notifications are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the notifications table.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - notification_repository_impl.py
# - Database migration scripts (schema generation)

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, false, func

from app.shared.config.database import DatabaseBase


class NotificationModel(DatabaseBase):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(20), nullable=False)
    read = Column(Boolean, nullable=False, default=False, server_default=false())
    related_id = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("type IN ('task', 'issue', 'badge', 'tip')", name="type"),
    )

    def __repr__(self) -> str:
        return f"<NotificationModel(id={self.id}, user_id={self.user_id}, type='{self.type}')>"
