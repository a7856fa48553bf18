"""Tests for startup wiring and the demo garden."""

from __future__ import annotations

from app.bootstrap import DEMO_USERNAME, seed_demo_garden, shutdown, startup
from app.modules.care_management.application.handlers.query_handlers import ListTasksQueryHandler
from app.modules.gamification.application.handlers.query_handlers import (
    ListBadgesQueryHandler,
    ListUserBadgesQueryHandler,
)
from app.modules.gamification.domain.rules import FIRST_PLANT
from app.modules.health_monitoring.application.handlers.query_handlers import GetLatestAnalysisQueryHandler
from app.modules.notification_communication.application.handlers.query_handlers import (
    ListNotificationsQueryHandler,
)
from app.modules.plant_management.application.handlers.query_handlers import ListPlantsQueryHandler
from app.modules.user_management.application.handlers.query_handlers import GetUserQueryHandler
from app.shared.core.dependencies import get_unit_of_work_factory


async def test_demo_garden_contents(uow_factory, handler_args):
    user = await seed_demo_garden(uow_factory, handler_args["settings"])

    assert user.username == DEMO_USERNAME
    query = {"user_id": user.id}

    plants = await ListPlantsQueryHandler(**handler_args).handle(query)
    assert [p.name for p in plants] == ["Monstera", "Snake Plant"]
    monstera, snake_plant = plants
    assert (monstera.health_score, monstera.water_level, monstera.pest_risk) == (60, 20, 20)
    assert (snake_plant.health_score, snake_plant.light_level) == (75, 50)

    tasks = await ListTasksQueryHandler(**handler_args).handle(query)
    assert sorted(t.title for t in tasks) == [
        "Apply Fertilizer", "Move Snake Plant", "Water Monstera", "Water Thoroughly",
    ]
    assert not any(t.completed for t in tasks)

    badges = await ListUserBadgesQueryHandler(**handler_args).handle(query)
    assert [b.badge.name for b in badges] == [FIRST_PLANT]

    notifications = await ListNotificationsQueryHandler(**handler_args).handle(query)
    assert sorted(n.type for n in notifications) == ["badge", "issue", "issue", "tip"]

    latest = await GetLatestAnalysisQueryHandler(**handler_args).handle({**query, "plant_id": monstera.id})
    assert len(latest.recommendations) == 4

    refreshed = await GetUserQueryHandler(**handler_args).handle(query)
    assert refreshed.points == 25 + 15
    assert refreshed.level == 1


async def test_demo_garden_is_seeded_once(uow_factory, handler_args):
    assert await seed_demo_garden(uow_factory, handler_args["settings"]) is not None
    assert await seed_demo_garden(uow_factory, handler_args["settings"]) is None


async def test_startup_and_shutdown(settings):
    settings.SEED_DEMO_GARDEN = True
    factory = await startup(settings)
    try:
        assert get_unit_of_work_factory() is factory
        async with factory() as uow:
            demo = await uow.users.get_by_username(DEMO_USERNAME)
        assert demo is not None

        badges = await ListBadgesQueryHandler(uow_factory=factory, settings=settings).handle({"user_id": demo.id})
        assert len(badges) == 6
    finally:
        await shutdown(settings)
