from .plant_commands import CreatePlantCommand, DeletePlantCommand, UpdatePlantCommand

__all__ = [
    "CreatePlantCommand",
    "UpdatePlantCommand",
    "DeletePlantCommand",
]
