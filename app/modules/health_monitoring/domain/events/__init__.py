from .analysis_events import AnalysisRecorded

__all__ = ["AnalysisRecorded"]
