from .analysis_repository import AnalysisRepository

__all__ = ["AnalysisRepository"]
