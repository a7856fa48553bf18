from .models import PlantModel
from .plant_repository_impl import PlantRepositoryImpl

__all__ = [
    "PlantModel",
    "PlantRepositoryImpl",
]
