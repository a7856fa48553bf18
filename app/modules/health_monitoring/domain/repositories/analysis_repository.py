# 📄 File: app/modules/health_monitoring/domain/repositories/analysis_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how plant check-ups are saved and looked up, including "the most recent one"
# 🧪 Purpose (Technical Summary):
# Repository interface for the append-only PlantAnalysis history
# 🔗 Dependencies:
# PlantAnalysis domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# analysis_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.analysis import PlantAnalysis


class AnalysisRepository(ABC):
    """
    Repository interface for plant analyses. Analyses are never updated.
    """

    @abstractmethod
    async def create(self, analysis: PlantAnalysis) -> PlantAnalysis:
        pass

    @abstractmethod
    async def get_by_id(self, analysis_id: int) -> Optional[PlantAnalysis]:
        pass

    @abstractmethod
    async def list_by_plant(self, plant_id: int) -> List[PlantAnalysis]:
        """Get a plant's analyses, newest first."""
        pass

    @abstractmethod
    async def get_latest(self, plant_id: int) -> Optional[PlantAnalysis]:
        """
        Get the analysis with the greatest created_at, ties going to the
        highest id.
        """
        pass
