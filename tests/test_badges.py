"""Tests for the badge catalog, requirement evaluation and awarding."""

from __future__ import annotations

import pytest

from app.modules.care_management.domain.models.task import Task, TaskType
from app.modules.gamification.application.handlers.command_handlers import AwardBadgeCommandHandler
from app.modules.gamification.application.handlers.query_handlers import (
    ListBadgesQueryHandler,
    ListUserBadgesQueryHandler,
)
from app.modules.gamification.domain.events.badge_events import BadgeEarned
from app.modules.gamification.domain.models.badge import (
    BadgeProgress,
    PlantsAddedRequirement,
    PlantsRevivedRequirement,
    WateringCompletedRequirement,
    parse_requirement,
)
from app.modules.gamification.domain.rules import (
    BADGE_CATALOG,
    DIAGNOSTICIAN,
    FIRST_PLANT,
    HYDRATION_PRO,
    PLANT_REVIVER,
    get_definition,
)
from app.modules.gamification.infrastructure.seed import seed_badge_catalog
from app.modules.notification_communication.application.handlers.query_handlers import (
    ListNotificationsQueryHandler,
)
from app.modules.plant_management.domain.models.plant import Plant
from app.modules.user_management.application.handlers.query_handlers import GetUserQueryHandler
from app.modules.user_management.domain.events.user_events import PointsGranted
from app.shared.core.exceptions import BadgeNotFoundError, UserNotFoundError, ValidationError

# ------------------------------------------------------------------
# requirements
# ------------------------------------------------------------------


def test_parse_requirement_picks_variant():
    requirement = parse_requirement({"kind": "watering_completed", "count": 5})
    assert isinstance(requirement, WateringCompletedRequirement)
    assert requirement.count == 5


def test_parse_requirement_rejects_unknown_kind():
    with pytest.raises(ValueError):
        parse_requirement({"kind": "sunbathing", "count": 3})


def test_count_requirement_threshold():
    requirement = PlantsAddedRequirement(count=1)
    assert not requirement.is_satisfied(BadgeProgress())
    assert requirement.is_satisfied(BadgeProgress(plants_added=1))
    assert requirement.is_satisfied(BadgeProgress(plants_added=3))


def test_unevaluable_requirement_is_never_satisfied():
    requirement = PlantsRevivedRequirement(count=1)
    assert not requirement.is_satisfied(BadgeProgress(plants_revived=50))


def test_catalog_bonuses():
    assert get_definition(FIRST_PLANT).points_bonus == 25
    assert get_definition(HYDRATION_PRO).points_bonus == 50
    assert len({definition.name for definition in BADGE_CATALOG}) == 6
    with pytest.raises(KeyError):
        get_definition("Moss Master")


# ------------------------------------------------------------------
# catalog
# ------------------------------------------------------------------


async def test_seeding_is_idempotent(uow_factory, make_user, handler_args):
    async with uow_factory() as uow:
        created = await seed_badge_catalog(uow.badges)
    assert created == []

    user = await make_user()
    badges = await ListBadgesQueryHandler(**handler_args).handle({"user_id": user.id})
    assert [b.name for b in badges] == [d.name for d in BADGE_CATALOG]
    assert all(b.id is not None for b in badges)


async def test_catalog_requirements_survive_storage(make_user, handler_args):
    user = await make_user()
    badges = await ListBadgesQueryHandler(**handler_args).handle({"user_id": user.id})
    by_name = {b.name: b for b in badges}

    assert isinstance(by_name[HYDRATION_PRO].requirements, WateringCompletedRequirement)
    assert by_name[HYDRATION_PRO].requirements.count == 5
    assert by_name[FIRST_PLANT].is_evaluable
    assert not by_name[DIAGNOSTICIAN].is_evaluable


# ------------------------------------------------------------------
# awarding
# ------------------------------------------------------------------


@pytest.fixture
def stored_garden(uow_factory):
    """Write a plant and water tasks straight to the store, so no badge rule runs."""

    async def _stored_garden(user_id: int, waterings: int = 0, pending: int = 0):
        async with uow_factory(users=[user_id]) as uow:
            plant = await uow.plants.create(Plant(user_id=user_id, name="Fern"))
            for i in range(waterings + pending):
                await uow.tasks.create(
                    Task(
                        plant_id=plant.id,
                        user_id=user_id,
                        title=f"Water #{i + 1}",
                        type=TaskType.WATER,
                        completed=i < waterings,
                    )
                )
        return plant

    return _stored_garden


async def test_award_badge_grants_bonus_and_notifies(make_user, stored_garden, handler_args, publisher):
    user = await make_user()
    await stored_garden(user.id, waterings=5)
    publisher.clear_history()

    awarded = await AwardBadgeCommandHandler(**handler_args).handle(
        {"user_id": user.id, "badge_name": HYDRATION_PRO}
    )

    assert awarded is not None
    assert awarded.user_id == user.id
    earned = publisher.recent_events(BadgeEarned.EVENT_TYPE)
    assert [e.data["points_bonus"] for e in earned] == [50]
    granted = publisher.recent_events(PointsGranted.EVENT_TYPE)
    assert granted[0].data["reason"] == f"badge:{HYDRATION_PRO}"

    refreshed = await GetUserQueryHandler(**handler_args).handle({"user_id": user.id})
    assert refreshed.points == 50

    notifications = await ListNotificationsQueryHandler(**handler_args).handle({"user_id": user.id})
    assert [n.type for n in notifications] == ["badge"]
    assert HYDRATION_PRO in notifications[0].message


async def test_award_badge_twice_is_a_no_op(make_user, stored_garden, handler_args, publisher):
    user = await make_user()
    await stored_garden(user.id)
    handler = AwardBadgeCommandHandler(**handler_args)
    assert await handler.handle({"user_id": user.id, "badge_name": FIRST_PLANT}) is not None
    publisher.clear_history()

    assert await handler.handle({"user_id": user.id, "badge_name": FIRST_PLANT}) is None
    assert publisher.recent_events() == []

    badges = await ListUserBadgesQueryHandler(**handler_args).handle({"user_id": user.id})
    assert [b.badge.name for b in badges] == [FIRST_PLANT]
    refreshed = await GetUserQueryHandler(**handler_args).handle({"user_id": user.id})
    assert refreshed.points == 25


async def test_new_user_cannot_claim_any_badge(make_user, handler_args, publisher):
    user = await make_user()
    handler = AwardBadgeCommandHandler(**handler_args)
    publisher.clear_history()

    for definition in BADGE_CATALOG:
        assert await handler.handle({"user_id": user.id, "badge_name": definition.name}) is None

    assert publisher.recent_events() == []
    assert await ListUserBadgesQueryHandler(**handler_args).handle({"user_id": user.id}) == []
    refreshed = await GetUserQueryHandler(**handler_args).handle({"user_id": user.id})
    assert refreshed.points == 0


async def test_award_counts_only_completed_waterings(make_user, stored_garden, handler_args, publisher):
    user = await make_user()
    await stored_garden(user.id, waterings=4, pending=3)
    publisher.clear_history()

    awarded = await AwardBadgeCommandHandler(**handler_args).handle(
        {"user_id": user.id, "badge_name": HYDRATION_PRO}
    )

    assert awarded is None
    assert publisher.recent_events() == []


async def test_award_command_rejects_caller_progress(make_user, handler_args):
    user = await make_user()
    with pytest.raises(ValidationError):
        await AwardBadgeCommandHandler(**handler_args).handle(
            {"user_id": user.id, "badge_name": HYDRATION_PRO, "progress": {"watering_completed": 5}}
        )


async def test_gather_progress_reads_the_store(make_user, stored_garden, services):
    user = await make_user()
    await stored_garden(user.id, waterings=2, pending=1)

    async with services(users=[user.id]) as (uow, svc):
        progress = await svc.badges.gather_progress(user.id)

    assert progress.plants_added == 1
    assert progress.watering_completed == 2
    assert progress.plants_revived == 0


async def test_unmet_caller_progress_awards_nothing(make_user, stored_garden, services):
    user = await make_user()
    await stored_garden(user.id, waterings=5)

    async with services(users=[user.id]) as (uow, svc):
        awarded = uow.collect(
            await svc.badges.try_award_badge(user.id, HYDRATION_PRO, BadgeProgress(watering_completed=4))
        )

    assert awarded is None


async def test_unevaluable_badge_stays_locked_against_progress(make_user, services, handler_args):
    user = await make_user()

    async with services(users=[user.id]) as (uow, svc):
        with_progress = uow.collect(
            await svc.badges.try_award_badge(user.id, PLANT_REVIVER, BadgeProgress(plants_revived=10))
        )
        without_progress = uow.collect(await svc.badges.try_award_badge(user.id, PLANT_REVIVER))

    assert with_progress is None
    assert without_progress is None
    assert await AwardBadgeCommandHandler(**handler_args).handle(
        {"user_id": user.id, "badge_name": PLANT_REVIVER}
    ) is None
    refreshed = await GetUserQueryHandler(**handler_args).handle({"user_id": user.id})
    assert refreshed.points == 0


async def test_award_unknown_badge(make_user, handler_args):
    user = await make_user()
    with pytest.raises(BadgeNotFoundError):
        await AwardBadgeCommandHandler(**handler_args).handle({"user_id": user.id, "badge_name": "Moss Master"})


async def test_award_badge_to_unknown_user(handler_args):
    with pytest.raises(UserNotFoundError):
        await AwardBadgeCommandHandler(**handler_args).handle({"user_id": 12345, "badge_name": FIRST_PLANT})


async def test_list_badges_of_unknown_user(handler_args):
    with pytest.raises(UserNotFoundError):
        await ListUserBadgesQueryHandler(**handler_args).handle({"user_id": 12345})
