# 📄 File: app/modules/plant_management/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for plants: saving new ones, finding a user's plants,
# storing edits and health updates, and removing plants.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of PlantRepository using SQLAlchemy async ORM,
# mapping between PlantModel rows and Plant domain entities with error translation.
#
# 🔗 Dependencies:
# - app.modules.plant_management.domain.repositories.plant_repository (interface)
# - app.modules.plant_management.infrastructure.database.models (SQLAlchemy models)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.unit_of_work (repository wiring)

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.plant_management.domain.models.plant import HEALTH_FIELDS, Plant
from app.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from app.modules.plant_management.infrastructure.database.models import PlantModel
from app.shared.core.exceptions import PlantNotFoundError, RepositoryError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)

_MUTABLE_COLUMNS = ("name", "species", "image_url") + HEALTH_FIELDS + ("last_watered", "last_fertilized")


class PlantRepositoryImpl(PlantRepository):
    """
    SQLAlchemy implementation of the PlantRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, plant: Plant) -> Plant:
        try:
            plant_model = self._domain_to_model(plant)

            self._session.add(plant_model)
            await self._session.flush()

            logger.debug(f"Created plant with ID: {plant_model.id}")
            return self._model_to_domain(plant_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error during plant creation: {str(e)}")
            raise RepositoryError(
                message="Failed to create plant",
                operation="create",
                entity="plant",
                details={"error": str(e)}
            ) from e

    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        try:
            plant_model = await self._session.get(PlantModel, plant_id)
            return self._model_to_domain(plant_model) if plant_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving plant {plant_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to retrieve plant",
                operation="get_by_id",
                entity="plant",
                details={"error": str(e)}
            ) from e

    async def list_by_user(self, user_id: int) -> List[Plant]:
        try:
            stmt = (
                select(PlantModel)
                .where(PlantModel.user_id == user_id)
                .order_by(PlantModel.created_at.asc(), PlantModel.id.asc())
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing plants for user {user_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to list plants",
                operation="list_by_user",
                entity="plant",
                details={"error": str(e)}
            ) from e

    async def count_by_user(self, user_id: int) -> int:
        try:
            stmt = select(func.count(PlantModel.id)).where(PlantModel.user_id == user_id)
            result = await self._session.execute(stmt)
            return result.scalar_one()

        except SQLAlchemyError as e:
            logger.error(f"Database error counting plants for user {user_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to count plants",
                operation="count_by_user",
                entity="plant",
                details={"error": str(e)}
            ) from e

    async def update(self, plant: Plant) -> Plant:
        try:
            plant_model = await self._session.get(PlantModel, plant.id)
            if plant_model is None:
                raise PlantNotFoundError(plant.id)

            for column in _MUTABLE_COLUMNS:
                setattr(plant_model, column, getattr(plant, column))
            await self._session.flush()

            logger.debug(f"Updated plant {plant.id}")
            return self._model_to_domain(plant_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating plant {plant.id}: {str(e)}")
            raise RepositoryError(
                message="Failed to update plant",
                operation="update",
                entity="plant",
                details={"error": str(e)}
            ) from e

    async def delete(self, plant_id: int) -> bool:
        try:
            result = await self._session.execute(delete(PlantModel).where(PlantModel.id == plant_id))
            return result.rowcount > 0

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting plant {plant_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to delete plant",
                operation="delete",
                entity="plant",
                details={"error": str(e)}
            ) from e

    def _domain_to_model(self, plant: Plant) -> PlantModel:
        return PlantModel(
            id=plant.id,
            user_id=plant.user_id,
            created_at=plant.created_at,
            **{column: getattr(plant, column) for column in _MUTABLE_COLUMNS}
        )

    def _model_to_domain(self, plant_model: PlantModel) -> Plant:
        return Plant(
            id=plant_model.id,
            user_id=plant_model.user_id,
            name=plant_model.name,
            species=plant_model.species,
            image_url=plant_model.image_url,
            health_score=plant_model.health_score,
            water_level=plant_model.water_level,
            light_level=plant_model.light_level,
            nutrient_level=plant_model.nutrient_level,
            pest_risk=plant_model.pest_risk,
            last_watered=ensure_utc(plant_model.last_watered),
            last_fertilized=ensure_utc(plant_model.last_fertilized),
            created_at=ensure_utc(plant_model.created_at),
        )
