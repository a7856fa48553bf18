# 📄 File: app/modules/plant_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how plants and their latest health scores are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the plants table, health fields bounded by check constraints.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - plant_repository_impl.py (CRUD operations)
# - care_management models (tasks.plant_id foreign key)
# - Database migration scripts (schema generation)

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, func

from app.shared.config.database import DatabaseBase


class PlantModel(DatabaseBase):
    """
    SQLAlchemy model for plants.

    Tasks reference this table with ON DELETE CASCADE.
    """
    __tablename__ = "plants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    species = Column(String(100), nullable=True)
    image_url = Column(Text, nullable=True)

    # Health snapshot from the latest analysis
    health_score = Column(Integer, nullable=False, default=100, server_default="100")
    water_level = Column(Integer, nullable=False, default=100, server_default="100")
    light_level = Column(Integer, nullable=False, default=100, server_default="100")
    nutrient_level = Column(Integer, nullable=False, default=100, server_default="100")
    pest_risk = Column(Integer, nullable=False, default=0, server_default="0")

    last_watered = Column(DateTime(timezone=True), nullable=True)
    last_fertilized = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("health_score BETWEEN 0 AND 100", name="health_score_range"),
        CheckConstraint("water_level BETWEEN 0 AND 100", name="water_level_range"),
        CheckConstraint("light_level BETWEEN 0 AND 100", name="light_level_range"),
        CheckConstraint("nutrient_level BETWEEN 0 AND 100", name="nutrient_level_range"),
        CheckConstraint("pest_risk BETWEEN 0 AND 100", name="pest_risk_range"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<PlantModel(id={self.id}, user_id={self.user_id}, name='{self.name}')>"
