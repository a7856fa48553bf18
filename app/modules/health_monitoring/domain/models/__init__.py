from .analysis import PlantAnalysis, PlantIssue, Recommendation, RecommendationPriority

__all__ = [
    "PlantAnalysis",
    "PlantIssue",
    "Recommendation",
    "RecommendationPriority",
]
