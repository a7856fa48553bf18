from .analysis_queries import GetLatestAnalysisQuery, ListAnalysesQuery

__all__ = [
    "ListAnalysesQuery",
    "GetLatestAnalysisQuery",
]
