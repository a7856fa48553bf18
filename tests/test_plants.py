"""Tests for the plant lifecycle, First Plant and ownership checks."""

from __future__ import annotations

import pytest

from app.modules.care_management.application.handlers.command_handlers import CreateTaskCommandHandler
from app.modules.care_management.application.handlers.query_handlers import ListTasksQueryHandler
from app.modules.gamification.application.handlers.query_handlers import ListUserBadgesQueryHandler
from app.modules.gamification.domain.events.badge_events import BadgeEarned
from app.modules.gamification.domain.rules import FIRST_PLANT
from app.modules.notification_communication.application.handlers.query_handlers import (
    ListNotificationsQueryHandler,
)
from app.modules.plant_management.application.handlers.command_handlers import (
    DeletePlantCommandHandler,
    UpdatePlantCommandHandler,
)
from app.modules.plant_management.application.handlers.query_handlers import (
    GetPlantQueryHandler,
    ListPlantsQueryHandler,
)
from app.modules.plant_management.domain.events.plant_events import PlantCreated, PlantDeleted, PlantUpdated
from app.modules.plant_management.domain.models.plant import HealthMetrics, Plant
from app.modules.user_management.application.handlers.query_handlers import GetUserQueryHandler
from app.shared.core.exceptions import AuthorizationError, PlantNotFoundError, UserNotFoundError, ValidationError

# ------------------------------------------------------------------
# domain model
# ------------------------------------------------------------------


def test_new_plant_is_healthy_by_default():
    plant = Plant(user_id=1, name="Fern")
    assert (plant.health_score, plant.water_level, plant.pest_risk) == (100, 100, 0)


@pytest.mark.parametrize("field", ["health_score", "water_level", "light_level", "nutrient_level", "pest_risk"])
def test_health_metrics_are_bounded(field):
    values = dict(health_score=50, water_level=50, light_level=50, nutrient_level=50, pest_risk=50)
    values[field] = 101
    with pytest.raises(ValueError):
        HealthMetrics(**values)


def test_apply_changes_records_validated_values():
    plant = Plant(user_id=1, name="Fern", water_level=40)
    changed = plant.apply_changes({"name": "  Fern  ", "water_level": "65", "species": "Boston Fern"})
    assert changed == {"water_level": 65, "species": "Boston Fern"}
    assert plant.name == "Fern"
    assert plant.water_level == 65


# ------------------------------------------------------------------
# create / First Plant
# ------------------------------------------------------------------


async def test_first_plant_awards_badge_once(make_user, make_plant, handler_args, publisher):
    user = await make_user()
    publisher.clear_history()

    await make_plant(user.id, "Monstera")
    first_events = [e.event_type for e in publisher.recent_events()]
    assert first_events[0] == PlantCreated.EVENT_TYPE
    assert BadgeEarned.EVENT_TYPE in first_events

    publisher.clear_history()
    await make_plant(user.id, "Snake Plant")
    assert publisher.recent_events(BadgeEarned.EVENT_TYPE) == []

    badges = await ListUserBadgesQueryHandler(**handler_args).handle({"user_id": user.id})
    assert [earned.badge.name for earned in badges] == [FIRST_PLANT]

    refreshed = await GetUserQueryHandler(**handler_args).handle({"user_id": user.id})
    assert refreshed.points == 25

    notifications = await ListNotificationsQueryHandler(**handler_args).handle({"user_id": user.id})
    assert [n.type for n in notifications] == ["badge"]
    assert FIRST_PLANT in notifications[0].message


async def test_create_plant_for_unknown_user(make_plant):
    with pytest.raises(UserNotFoundError):
        await make_plant(777)


async def test_create_plant_requires_name(make_user, make_plant):
    user = await make_user()
    with pytest.raises(ValidationError):
        await make_plant(user.id, "")


async def test_list_plants_only_returns_own(make_user, make_plant, handler_args):
    alice = await make_user("alice")
    bob = await make_user("bob")
    await make_plant(alice.id, "Aloe")
    await make_plant(bob.id, "Basil")
    await make_plant(alice.id, "Cactus")

    plants = await ListPlantsQueryHandler(**handler_args).handle({"user_id": alice.id})
    assert [p.name for p in plants] == ["Aloe", "Cactus"]


# ------------------------------------------------------------------
# update
# ------------------------------------------------------------------


async def test_update_plant_fields(make_user, make_plant, handler_args, publisher):
    user = await make_user()
    plant = await make_plant(user.id)
    publisher.clear_history()

    updated = await UpdatePlantCommandHandler(**handler_args).handle(
        {"user_id": user.id, "plant_id": plant.id, "name": "Swiss Cheese", "water_level": 25}
    )

    assert updated.name == "Swiss Cheese"
    assert updated.water_level == 25
    assert updated.species == plant.species
    event = publisher.recent_events(PlantUpdated.EVENT_TYPE)[0]
    assert sorted(event.data["changed_fields"]) == ["name", "water_level"]


async def test_update_without_changes_emits_nothing(make_user, make_plant, handler_args, publisher):
    user = await make_user()
    plant = await make_plant(user.id)
    publisher.clear_history()

    await UpdatePlantCommandHandler(**handler_args).handle({"user_id": user.id, "plant_id": plant.id})

    assert publisher.recent_events() == []


async def test_update_rejects_out_of_range_metric(make_user, make_plant, handler_args):
    user = await make_user()
    plant = await make_plant(user.id)
    with pytest.raises(ValidationError):
        await UpdatePlantCommandHandler(**handler_args).handle(
            {"user_id": user.id, "plant_id": plant.id, "health_score": 150}
        )


async def test_update_rejects_unknown_field(make_user, make_plant, services):
    user = await make_user()
    plant = await make_plant(user.id)
    async with services(users=[user.id], plants=[plant.id]) as (_, svc):
        with pytest.raises(ValidationError):
            await svc.plants.update_plant(plant.id, {"user_id": 2})


async def test_update_someone_elses_plant(make_user, make_plant, handler_args):
    owner = await make_user("owner")
    intruder = await make_user("intruder")
    plant = await make_plant(owner.id)

    with pytest.raises(AuthorizationError):
        await UpdatePlantCommandHandler(**handler_args).handle(
            {"user_id": intruder.id, "plant_id": plant.id, "name": "Mine now"}
        )

    unchanged = await GetPlantQueryHandler(**handler_args).handle({"user_id": owner.id, "plant_id": plant.id})
    assert unchanged.name == plant.name


async def test_get_someone_elses_plant(make_user, make_plant, handler_args):
    owner = await make_user("owner")
    intruder = await make_user("intruder")
    plant = await make_plant(owner.id)

    with pytest.raises(AuthorizationError):
        await GetPlantQueryHandler(**handler_args).handle({"user_id": intruder.id, "plant_id": plant.id})


# ------------------------------------------------------------------
# delete
# ------------------------------------------------------------------


async def test_delete_plant_removes_its_tasks(make_user, make_plant, handler_args, publisher):
    user = await make_user()
    doomed = await make_plant(user.id, "Doomed")
    kept = await make_plant(user.id, "Kept")
    create_task = CreateTaskCommandHandler(**handler_args)
    for plant, title in ((doomed, "Water doomed"), (doomed, "Feed doomed"), (kept, "Water kept")):
        await create_task.handle({"user_id": user.id, "plant_id": plant.id, "title": title, "type": "water"})
    publisher.clear_history()

    deleted = await DeletePlantCommandHandler(**handler_args).handle({"user_id": user.id, "plant_id": doomed.id})

    assert deleted is True
    tasks = await ListTasksQueryHandler(**handler_args).handle({"user_id": user.id})
    assert [t.title for t in tasks] == ["Water kept"]
    event = publisher.recent_events(PlantDeleted.EVENT_TYPE)[0]
    assert event.data["deleted_task_count"] == 2

    with pytest.raises(PlantNotFoundError):
        await GetPlantQueryHandler(**handler_args).handle({"user_id": user.id, "plant_id": doomed.id})


async def test_delete_missing_plant(make_user, handler_args, publisher):
    user = await make_user()
    publisher.clear_history()

    with pytest.raises(PlantNotFoundError):
        await DeletePlantCommandHandler(**handler_args).handle({"user_id": user.id, "plant_id": 404})
    assert publisher.recent_events() == []


async def test_delete_plant_service_reports_missing(make_user, services):
    user = await make_user()
    async with services(users=[user.id]) as (uow, svc):
        deleted = uow.collect(await svc.plants.delete_plant(404))
    assert deleted is False


async def test_delete_someone_elses_plant(make_user, make_plant, handler_args):
    owner = await make_user("owner")
    intruder = await make_user("intruder")
    plant = await make_plant(owner.id)

    with pytest.raises(AuthorizationError):
        await DeletePlantCommandHandler(**handler_args).handle({"user_id": intruder.id, "plant_id": plant.id})

    still_there = await GetPlantQueryHandler(**handler_args).handle({"user_id": owner.id, "plant_id": plant.id})
    assert still_there.id == plant.id
