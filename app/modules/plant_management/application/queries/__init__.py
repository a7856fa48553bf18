from .plant_queries import GetPlantQuery, ListPlantsQuery

__all__ = [
    "ListPlantsQuery",
    "GetPlantQuery",
]
