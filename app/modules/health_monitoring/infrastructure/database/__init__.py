from .analysis_repository_impl import AnalysisRepositoryImpl
from .models import PlantAnalysisModel

__all__ = [
    "PlantAnalysisModel",
    "AnalysisRepositoryImpl",
]
