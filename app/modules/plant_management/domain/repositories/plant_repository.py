# 📄 File: app/modules/plant_management/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for saving, finding, changing and removing plants without tying the app to one database
# 🧪 Purpose (Technical Summary):
# Repository interface for Plant entities following the Repository pattern
# 🔗 Dependencies:
# Plant domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# plant_service.py, notification_service.py, analysis_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.plant import Plant


class PlantRepository(ABC):
    """
    Repository interface for Plant entity data access operations.
    """

    @abstractmethod
    async def create(self, plant: Plant) -> Plant:
        """
        Create a new plant.

        Args:
            plant: Plant entity to create

        Returns:
            Created Plant entity with its datastore id
        """
        pass

    @abstractmethod
    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        """
        Get plant by ID.

        Returns:
            Plant entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[Plant]:
        """Get all plants owned by a user, oldest first."""
        pass

    @abstractmethod
    async def count_by_user(self, user_id: int) -> int:
        pass

    @abstractmethod
    async def update(self, plant: Plant) -> Plant:
        """
        Persist every mutable field of the plant.

        Raises:
            PlantNotFoundError: If the plant no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, plant_id: int) -> bool:
        """
        Delete a plant row.

        Returns:
            True if a plant was deleted, False if it did not exist
        """
        pass
