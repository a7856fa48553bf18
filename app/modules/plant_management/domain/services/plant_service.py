# 📄 File: app/modules/plant_management/domain/services/plant_service.py
# 🧭 Purpose (Layman Explanation):
# Adds, edits and removes plants from a user's garden, hands out the "First Plant" badge
# and cleans up a plant's tasks when it is removed
# 🧪 Purpose (Technical Summary):
# Plant lifecycle service: creation runs the First Plant rule on the 0 -> 1 transition,
# deletion cascades to tasks, health snapshots are overwritten wholesale
# 🔗 Dependencies:
# PlantRepository, TaskRepository, UserRepository, BadgeService, plant events
# 🔄 Connected Modules / Calls From:
# plant command handlers, analysis_service.py (health snapshot), demo seeding

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.modules.care_management.domain.repositories.task_repository import TaskRepository
from app.modules.gamification.domain.models.badge import BadgeProgress
from app.modules.gamification.domain.rules import FIRST_PLANT
from app.modules.gamification.domain.services.badge_service import BadgeService
from app.modules.plant_management.domain.events.plant_events import (
    PlantCreated,
    PlantDeleted,
    PlantHealthUpdated,
    PlantUpdated,
)
from app.modules.plant_management.domain.models.plant import HealthMetrics, Plant
from app.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import PlantNotFoundError, UserNotFoundError, ValidationError
from app.shared.events.base import Outcome

logger = logging.getLogger(__name__)

# Fields a caller may change through a partial update
MUTABLE_PLANT_FIELDS = (
    "name",
    "species",
    "image_url",
    "health_score",
    "water_level",
    "light_level",
    "nutrient_level",
    "pest_risk",
    "last_watered",
    "last_fertilized",
)


class PlantService:
    """
    Domain service for plant lifecycle operations.
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        task_repository: TaskRepository,
        user_repository: UserRepository,
        badge_service: BadgeService,
    ):
        self.plant_repository = plant_repository
        self.task_repository = task_repository
        self.user_repository = user_repository
        self.badge_service = badge_service

    async def create_plant(
        self,
        user_id: int,
        name: str,
        species: Optional[str] = None,
        image_url: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Outcome[Plant]:
        """
        Add a plant to the user's garden.

        When this is the user's first plant, First Plant is awarded
        right after creation.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        if await self.user_repository.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        try:
            plant = Plant.create_new_plant(user_id, name, species, image_url, now)
        except ValueError as e:
            raise ValidationError(message=f"Invalid plant: {e}", field="name", value=name) from e

        plant = await self.plant_repository.create(plant)
        plant_count = await self.plant_repository.count_by_user(user_id)

        outcome: Outcome[Plant] = Outcome(value=plant)
        outcome.add(PlantCreated(plant.id, user_id, plant.name, plant_count))
        logger.info(f"User {user_id} added plant {plant.id} ({plant_count} in garden)")

        if plant_count == 1:
            outcome.absorb(
                await self.badge_service.try_award_badge(
                    user_id, FIRST_PLANT, BadgeProgress(plants_added=plant_count)
                )
            )

        return outcome

    async def get_plant(self, plant_id: int) -> Plant:
        plant = await self.plant_repository.get_by_id(plant_id)
        if plant is None:
            raise PlantNotFoundError(plant_id)
        return plant

    async def list_plants(self, user_id: int) -> List[Plant]:
        return await self.plant_repository.list_by_user(user_id)

    async def update_plant(self, plant_id: int, changes: Dict[str, Any]) -> Outcome[Plant]:
        """
        Apply a partial update to a plant.

        Raises:
            PlantNotFoundError: If the plant does not exist
            ValidationError: If a field is not updatable or a value is invalid
        """
        plant = await self.get_plant(plant_id)

        unknown = sorted(set(changes) - set(MUTABLE_PLANT_FIELDS))
        if unknown:
            raise ValidationError(
                message=f"Fields cannot be updated: {', '.join(unknown)}",
                field=unknown[0],
                constraint="mutable_fields"
            )

        try:
            changed = plant.apply_changes(changes)
        except ValueError as e:
            raise ValidationError(message=f"Invalid plant update: {e}", details={"plant_id": plant_id}) from e

        outcome: Outcome[Plant] = Outcome(value=plant)
        if changed:
            outcome.value = await self.plant_repository.update(plant)
            outcome.add(PlantUpdated(plant_id, plant.user_id, sorted(changed)))
        return outcome

    async def apply_health_snapshot(self, plant: Plant, metrics: HealthMetrics) -> Outcome[Plant]:
        """Overwrite the plant's five health fields with an analysis result."""
        plant.apply_health_snapshot(metrics)
        plant = await self.plant_repository.update(plant)
        return Outcome(
            value=plant,
            events=[PlantHealthUpdated(plant.id, plant.user_id, metrics.model_dump())],
        )

    async def delete_plant(self, plant_id: int) -> Outcome[bool]:
        """
        Delete a plant together with all of its tasks.

        Returns:
            Outcome with True if the plant was deleted, False (and no
            side effects) if it did not exist
        """
        plant = await self.plant_repository.get_by_id(plant_id)
        if plant is None:
            return Outcome(value=False)

        deleted_tasks = await self.task_repository.delete_by_plant(plant_id)
        await self.plant_repository.delete(plant_id)
        logger.info(f"Deleted plant {plant_id} and {deleted_tasks} tasks")
        return Outcome(value=True, events=[PlantDeleted(plant_id, plant.user_id, deleted_tasks)])
