# 📄 File: app/modules/plant_management/application/commands/plant_commands.py
# 🧭 Purpose (Layman Explanation):
# The requests for adding a plant, editing it and removing it from the garden
# 🧪 Purpose (Technical Summary):
# CQRS command definitions for plant lifecycle operations; UpdatePlantCommand is a partial update
# whose unset fields are left untouched
# 🔗 Dependencies:
# pydantic, app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# app.modules.plant_management.application.handlers.command_handlers

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from app.shared.core.commands import Command


class CreatePlantCommand(Command):
    name: str = Field(..., min_length=1, max_length=100, description="Plant nickname")
    species: Optional[str] = Field(None, max_length=100)
    image_url: Optional[str] = None


class UpdatePlantCommand(Command):
    """
    Partial plant update. Only fields present in the payload are applied.
    """

    plant_id: int = Field(..., gt=0)

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    species: Optional[str] = Field(None, max_length=100)
    image_url: Optional[str] = None

    health_score: Optional[int] = Field(None, ge=0, le=100)
    water_level: Optional[int] = Field(None, ge=0, le=100)
    light_level: Optional[int] = Field(None, ge=0, le=100)
    nutrient_level: Optional[int] = Field(None, ge=0, le=100)
    pest_risk: Optional[int] = Field(None, ge=0, le=100)

    last_watered: Optional[datetime] = None
    last_fertilized: Optional[datetime] = None

    def get_update_data(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude={"user_id", "plant_id"})

    def has_updates(self) -> bool:
        return bool(self.get_update_data())


class DeletePlantCommand(Command):
    plant_id: int = Field(..., gt=0)
