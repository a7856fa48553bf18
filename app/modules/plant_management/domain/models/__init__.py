from .plant import HEALTH_FIELDS, HealthMetrics, Plant

__all__ = [
    "Plant",
    "HealthMetrics",
    "HEALTH_FIELDS",
]
