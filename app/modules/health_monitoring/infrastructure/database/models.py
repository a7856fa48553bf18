# 📄 File: app/modules/health_monitoring/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how plant check-up results are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the append-only plant_analyses table; issues and
# recommendations are stored as JSON arrays of typed payloads.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - analysis_repository_impl.py
# - Database migration scripts (schema generation)

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, Text, func

from app.shared.config.database import DatabaseBase


class PlantAnalysisModel(DatabaseBase):
    """
    SQLAlchemy model for plant analyses.

    plant_id has no foreign key: the history outlives a deleted plant.
    """
    __tablename__ = "plant_analyses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(Integer, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    health_score = Column(Integer, nullable=False)
    water_level = Column(Integer, nullable=False)
    light_level = Column(Integer, nullable=False)
    nutrient_level = Column(Integer, nullable=False)
    pest_risk = Column(Integer, nullable=False)

    issues = Column(JSON, nullable=False, default=list)
    recommendations = Column(JSON, nullable=False, default=list)
    image_url = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_plant_analyses_plant_id_created_at", "plant_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<PlantAnalysisModel(id={self.id}, plant_id={self.plant_id}, health_score={self.health_score})>"
