# 📄 File: app/modules/health_monitoring/infrastructure/database/analysis_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file saves plant check-ups and finds a plant's check-up history and its most recent result.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of AnalysisRepository using SQLAlchemy async ORM; JSON payload columns
# are validated back into PlantIssue / Recommendation models on load.
#
# 🔗 Dependencies:
# - app.modules.health_monitoring.domain.repositories.analysis_repository (interface)
# - app.modules.health_monitoring.infrastructure.database.models (SQLAlchemy models)
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.unit_of_work (repository wiring)

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.health_monitoring.domain.models.analysis import PlantAnalysis
from app.modules.health_monitoring.domain.repositories.analysis_repository import AnalysisRepository
from app.modules.health_monitoring.infrastructure.database.models import PlantAnalysisModel
from app.modules.plant_management.domain.models.plant import HEALTH_FIELDS
from app.shared.core.exceptions import RepositoryError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class AnalysisRepositoryImpl(AnalysisRepository):
    """
    SQLAlchemy implementation of the AnalysisRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, analysis: PlantAnalysis) -> PlantAnalysis:
        try:
            model = PlantAnalysisModel(
                plant_id=analysis.plant_id,
                user_id=analysis.user_id,
                issues=[issue.model_dump(mode="json") for issue in analysis.issues],
                recommendations=[rec.model_dump(mode="json") for rec in analysis.recommendations],
                image_url=analysis.image_url,
                created_at=analysis.created_at,
                **{field: getattr(analysis, field) for field in HEALTH_FIELDS}
            )
            self._session.add(model)
            await self._session.flush()

            logger.debug(f"Created analysis with ID: {model.id} for plant {analysis.plant_id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error during analysis creation: {str(e)}")
            raise RepositoryError(
                message="Failed to create plant analysis",
                operation="create",
                entity="plant_analysis",
                details={"error": str(e)}
            ) from e

    async def get_by_id(self, analysis_id: int) -> Optional[PlantAnalysis]:
        try:
            model = await self._session.get(PlantAnalysisModel, analysis_id)
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving analysis {analysis_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to retrieve plant analysis",
                operation="get_by_id",
                entity="plant_analysis",
                details={"error": str(e)}
            ) from e

    async def list_by_plant(self, plant_id: int) -> List[PlantAnalysis]:
        try:
            result = await self._session.execute(self._newest_first(plant_id))
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing analyses for plant {plant_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to list plant analyses",
                operation="list_by_plant",
                entity="plant_analysis",
                details={"error": str(e)}
            ) from e

    async def get_latest(self, plant_id: int) -> Optional[PlantAnalysis]:
        try:
            result = await self._session.execute(self._newest_first(plant_id).limit(1))
            model = result.scalars().first()
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving latest analysis for plant {plant_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to retrieve latest plant analysis",
                operation="get_latest",
                entity="plant_analysis",
                details={"error": str(e)}
            ) from e

    def _newest_first(self, plant_id: int):
        return (
            select(PlantAnalysisModel)
            .where(PlantAnalysisModel.plant_id == plant_id)
            .order_by(PlantAnalysisModel.created_at.desc(), PlantAnalysisModel.id.desc())
        )

    def _model_to_domain(self, model: PlantAnalysisModel) -> PlantAnalysis:
        return PlantAnalysis(
            id=model.id,
            plant_id=model.plant_id,
            user_id=model.user_id,
            issues=model.issues or [],
            recommendations=model.recommendations or [],
            image_url=model.image_url,
            created_at=ensure_utc(model.created_at),
            **{field: getattr(model, field) for field in HEALTH_FIELDS}
        )
