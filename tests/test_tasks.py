"""Tests for care tasks: CRUD, the completion transition and its rewards."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from app.modules.care_management.application.handlers.command_handlers import (
    CreateTaskCommandHandler,
    DeleteTaskCommandHandler,
    UpdateTaskCommandHandler,
)
from app.modules.care_management.application.handlers.query_handlers import (
    ListPlantTasksQueryHandler,
    ListTasksQueryHandler,
)
from app.modules.care_management.domain.events.task_events import (
    TaskCompleted,
    TaskCreated,
    TaskDeleted,
    TaskUpdated,
)
from app.modules.care_management.domain.models.task import Task, TaskType
from app.modules.gamification.application.handlers.query_handlers import ListUserBadgesQueryHandler
from app.modules.gamification.domain.events.badge_events import BadgeEarned
from app.modules.gamification.domain.rules import FIRST_PLANT, HYDRATION_PRO
from app.modules.user_management.application.handlers.query_handlers import GetUserQueryHandler
from app.modules.user_management.domain.events.user_events import PointsGranted
from app.shared.core.exceptions import (
    AuthorizationError,
    InvalidStateError,
    PlantNotFoundError,
    TaskNotFoundError,
    ValidationError,
)

# ------------------------------------------------------------------
# domain model
# ------------------------------------------------------------------


def test_complete_is_one_way():
    task = Task(plant_id=1, user_id=1, title="Water", type="water")
    assert task.complete() is True
    assert task.complete() is False
    assert task.completed is True


def test_task_type_is_normalized():
    assert Task(plant_id=1, user_id=1, title="Water", type=" WATER ").type == "water"
    assert Task(plant_id=1, user_id=1, title="Feed", type=TaskType.FERTILIZE).type == "fertilize"


def test_water_task_is_recognized_after_normalization():
    assert Task(plant_id=1, user_id=1, title="Water", type=" Water ").is_water_task
    assert not Task(plant_id=1, user_id=1, title="Mist", type="mist").is_water_task


def test_apply_changes_reports_only_real_changes():
    task = Task(plant_id=1, user_id=1, title="Water", type="water", priority="low")
    changed = task.apply_changes({"title": "Water", "priority": "urgent", "completed": True})
    assert changed == {"priority": "urgent"}
    assert task.completed is False


# ------------------------------------------------------------------
# helpers
# ------------------------------------------------------------------


@pytest.fixture
async def garden(make_user, make_plant):
    user = await make_user()
    plant = await make_plant(user.id)
    return user, plant


@pytest.fixture
def create_task(handler_args):
    handler = CreateTaskCommandHandler(**handler_args)

    async def _create(user_id: int, plant_id: int, title: str = "Water me", task_type: str = "water", **extra):
        return await handler.handle(
            {"user_id": user_id, "plant_id": plant_id, "title": title, "type": task_type, **extra}
        )

    return _create


async def _points(handler_args, user_id: int) -> int:
    user = await GetUserQueryHandler(**handler_args).handle({"user_id": user_id})
    return user.points


# ------------------------------------------------------------------
# create / list
# ------------------------------------------------------------------


async def test_create_task(garden, create_task, publisher):
    user, plant = garden
    publisher.clear_history()

    due = datetime(2026, 5, 1, 9, 0, tzinfo=timezone.utc)
    task = await create_task(user.id, plant.id, "Mist leaves", "mist", priority="high", due_date=due)

    assert task.id is not None
    assert task.priority == "high"
    assert task.completed is False
    assert task.due_date == due
    event = publisher.recent_events(TaskCreated.EVENT_TYPE)[0]
    assert event.data["source"] == "user"


async def test_create_task_for_missing_plant(garden, create_task):
    user, _ = garden
    with pytest.raises(PlantNotFoundError):
        await create_task(user.id, 9999)


async def test_create_task_on_someone_elses_plant(garden, make_user, create_task):
    _, plant = garden
    intruder = await make_user("intruder")
    with pytest.raises(AuthorizationError):
        await create_task(intruder.id, plant.id)


async def test_create_task_rejects_unknown_priority(garden, create_task):
    user, plant = garden
    with pytest.raises(ValidationError):
        await create_task(user.id, plant.id, priority="whenever")


async def test_list_tasks_orders_by_due_date(garden, create_task, handler_args):
    user, plant = garden
    await create_task(user.id, plant.id, "No date")
    await create_task(user.id, plant.id, "Later", due_date=datetime(2026, 6, 2, tzinfo=timezone.utc))
    await create_task(user.id, plant.id, "Sooner", due_date=datetime(2026, 6, 1, tzinfo=timezone.utc))

    tasks = await ListTasksQueryHandler(**handler_args).handle({"user_id": user.id})
    assert [t.title for t in tasks] == ["Sooner", "Later", "No date"]

    plant_tasks = await ListPlantTasksQueryHandler(**handler_args).handle(
        {"user_id": user.id, "plant_id": plant.id}
    )
    assert len(plant_tasks) == 3


# ------------------------------------------------------------------
# update / completion
# ------------------------------------------------------------------


async def test_completing_task_grants_points_once(garden, create_task, handler_args, publisher):
    user, plant = garden
    task = await create_task(user.id, plant.id, "Feed", "fertilize")
    before = await _points(handler_args, user.id)
    publisher.clear_history()

    update = UpdateTaskCommandHandler(**handler_args)
    done = await update.handle({"user_id": user.id, "task_id": task.id, "completed": True})
    assert done.completed is True
    assert await _points(handler_args, user.id) == before + 10
    assert [e.event_type for e in publisher.recent_events()] == [
        TaskUpdated.EVENT_TYPE,
        TaskCompleted.EVENT_TYPE,
        PointsGranted.EVENT_TYPE,
    ]

    publisher.clear_history()
    await update.handle({"user_id": user.id, "task_id": task.id, "completed": True})
    assert await _points(handler_args, user.id) == before + 10
    assert publisher.recent_events(TaskCompleted.EVENT_TYPE) == []


async def test_reopening_completed_task_is_rejected(garden, create_task, handler_args):
    user, plant = garden
    task = await create_task(user.id, plant.id)
    update = UpdateTaskCommandHandler(**handler_args)
    await update.handle({"user_id": user.id, "task_id": task.id, "completed": True})

    with pytest.raises(InvalidStateError):
        await update.handle({"user_id": user.id, "task_id": task.id, "completed": False})


async def test_update_task_fields(garden, create_task, handler_args, publisher):
    user, plant = garden
    task = await create_task(user.id, plant.id, "Water", priority="low")
    publisher.clear_history()

    updated = await UpdateTaskCommandHandler(**handler_args).handle(
        {"user_id": user.id, "task_id": task.id, "title": "Water deeply", "priority": "urgent"}
    )

    assert updated.title == "Water deeply"
    assert updated.priority == "urgent"
    assert updated.completed is False
    event = publisher.recent_events(TaskUpdated.EVENT_TYPE)[0]
    assert sorted(event.data["changed_fields"]) == ["priority", "title"]


async def test_update_missing_task(garden, handler_args):
    user, _ = garden
    with pytest.raises(TaskNotFoundError):
        await UpdateTaskCommandHandler(**handler_args).handle({"user_id": user.id, "task_id": 31337, "title": "x"})


async def test_complete_someone_elses_task(garden, make_user, create_task, handler_args):
    user, plant = garden
    task = await create_task(user.id, plant.id)
    intruder = await make_user("intruder")

    with pytest.raises(AuthorizationError):
        await UpdateTaskCommandHandler(**handler_args).handle(
            {"user_id": intruder.id, "task_id": task.id, "completed": True}
        )
    assert await _points(handler_args, intruder.id) == 0


# ------------------------------------------------------------------
# Hydration Pro
# ------------------------------------------------------------------


async def test_hydration_pro_on_fifth_watering(garden, create_task, handler_args, publisher):
    user, plant = garden
    update = UpdateTaskCommandHandler(**handler_args)
    tasks = [await create_task(user.id, plant.id, f"Water #{i}") for i in range(6)]
    points_before = await _points(handler_args, user.id)

    for task in tasks[:4]:
        await update.handle({"user_id": user.id, "task_id": task.id, "completed": True})
    badges = await ListUserBadgesQueryHandler(**handler_args).handle({"user_id": user.id})
    assert HYDRATION_PRO not in [b.badge.name for b in badges]
    assert await _points(handler_args, user.id) == points_before + 40

    publisher.clear_history()
    await update.handle({"user_id": user.id, "task_id": tasks[4].id, "completed": True})
    earned = publisher.recent_events(BadgeEarned.EVENT_TYPE)
    assert [e.badge_name for e in earned] == [HYDRATION_PRO]
    assert await _points(handler_args, user.id) == points_before + 50 + 50

    publisher.clear_history()
    await update.handle({"user_id": user.id, "task_id": tasks[5].id, "completed": True})
    assert publisher.recent_events(BadgeEarned.EVENT_TYPE) == []

    badges = await ListUserBadgesQueryHandler(**handler_args).handle({"user_id": user.id})
    assert [b.badge.name for b in badges] == [FIRST_PLANT, HYDRATION_PRO]


async def test_non_water_tasks_do_not_count_toward_hydration_pro(garden, create_task, handler_args):
    user, plant = garden
    update = UpdateTaskCommandHandler(**handler_args)
    for i in range(5):
        task = await create_task(user.id, plant.id, f"Feed #{i}", "fertilize")
        await update.handle({"user_id": user.id, "task_id": task.id, "completed": True})

    badges = await ListUserBadgesQueryHandler(**handler_args).handle({"user_id": user.id})
    assert HYDRATION_PRO not in [b.badge.name for b in badges]


# ------------------------------------------------------------------
# delete
# ------------------------------------------------------------------


async def test_delete_task(garden, create_task, handler_args, publisher):
    user, plant = garden
    task = await create_task(user.id, plant.id)
    publisher.clear_history()

    assert await DeleteTaskCommandHandler(**handler_args).handle({"user_id": user.id, "task_id": task.id}) is True
    assert [e.event_type for e in publisher.recent_events()] == [TaskDeleted.EVENT_TYPE]

    with pytest.raises(TaskNotFoundError):
        await DeleteTaskCommandHandler(**handler_args).handle({"user_id": user.id, "task_id": task.id})
