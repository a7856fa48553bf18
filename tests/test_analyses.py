"""Tests for recording analyses and everything derived from them."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.modules.care_management.application.handlers.query_handlers import ListTasksQueryHandler
from app.modules.care_management.domain.events.task_events import TaskCreated
from app.modules.health_monitoring.application.handlers.command_handlers import RecordAnalysisCommandHandler
from app.modules.health_monitoring.application.handlers.query_handlers import (
    GetLatestAnalysisQueryHandler,
    ListAnalysesQueryHandler,
)
from app.modules.health_monitoring.domain.events.analysis_events import AnalysisRecorded
from app.modules.health_monitoring.domain.models.analysis import PlantAnalysis, Recommendation
from app.modules.notification_communication.application.handlers.query_handlers import (
    ListNotificationsQueryHandler,
)
from app.modules.notification_communication.domain.services.notification_service import issue_title
from app.modules.plant_management.application.handlers.query_handlers import GetPlantQueryHandler
from app.modules.plant_management.domain.events.plant_events import PlantHealthUpdated
from app.modules.user_management.application.handlers.query_handlers import GetUserQueryHandler
from app.modules.user_management.domain.events.user_events import PointsGranted
from app.shared.core.exceptions import (
    AnalysisNotFoundError,
    AuthorizationError,
    PlantNotFoundError,
    ValidationError,
)

METRICS = {
    "health_score": 60,
    "water_level": 20,
    "light_level": 80,
    "nutrient_level": 40,
    "pest_risk": 20,
}

ISSUES = [
    {"name": "Dehydration", "description": "The soil is very dry.", "icon": "water_drop"},
    {"name": "Nutrient Deficiency", "description": "Yellowing leaves.", "icon": "grass"},
]

RECOMMENDATIONS = [
    {"title": "Water Thoroughly", "description": "Water until it drains.", "priority": "urgent",
     "type": "water", "icon": "water_drop", "tip": "Check the top 2 inches first."},
    {"title": "Apply Fertilizer", "description": "Balanced fertilizer.", "priority": "recommended",
     "type": "fertilize", "icon": "grass"},
    {"title": "Clean Leaves", "description": "Wipe dust off.", "priority": "maintenance",
     "type": "clean", "icon": "cleaning_services"},
]


@pytest.fixture
async def garden(make_user, make_plant):
    user = await make_user()
    plant = await make_plant(user.id, "Monstera")
    return user, plant


@pytest.fixture
def record(handler_args):
    handler = RecordAnalysisCommandHandler(**handler_args)

    async def _record(user_id: int, plant_id: int, **overrides):
        payload = {
            "user_id": user_id,
            "plant_id": plant_id,
            **METRICS,
            "issues": ISSUES,
            "recommendations": RECOMMENDATIONS,
            **overrides,
        }
        return await handler.handle(payload)

    return _record


# ------------------------------------------------------------------
# record_analysis
# ------------------------------------------------------------------


async def test_record_analysis_updates_plant_snapshot(garden, record, handler_args):
    user, plant = garden
    analysis = await record(user.id, plant.id)

    assert analysis.id is not None
    assert analysis.health_score == 60
    assert [issue.name for issue in analysis.issues] == ["Dehydration", "Nutrient Deficiency"]
    assert analysis.recommendations[0].tip == "Check the top 2 inches first."

    refreshed = await GetPlantQueryHandler(**handler_args).handle({"user_id": user.id, "plant_id": plant.id})
    for field, value in METRICS.items():
        assert getattr(refreshed, field) == value


async def test_record_analysis_creates_tasks_for_actionable_advice(garden, record, handler_args):
    user, plant = garden
    await record(user.id, plant.id)

    tasks = await ListTasksQueryHandler(**handler_args).handle({"user_id": user.id})
    assert [(t.title, t.type, t.priority) for t in tasks] == [
        ("Water Thoroughly", "water", "urgent"),
        ("Apply Fertilizer", "fertilize", "high"),
    ]
    assert all(t.plant_id == plant.id and not t.completed for t in tasks)


async def test_record_analysis_notifies_each_issue(garden, record, handler_args):
    user, plant = garden
    await record(user.id, plant.id)

    notifications = await ListNotificationsQueryHandler(**handler_args).handle({"user_id": user.id})
    issue_notes = [n for n in notifications if n.type == "issue"]
    assert sorted(n.title for n in issue_notes) == sorted(
        [issue_title("Dehydration", "Monstera"), issue_title("Nutrient Deficiency", "Monstera")]
    )
    assert all(n.related_id == plant.id and not n.read for n in issue_notes)


async def test_record_analysis_grants_points(garden, record, handler_args):
    user, plant = garden
    before = (await GetUserQueryHandler(**handler_args).handle({"user_id": user.id})).points

    await record(user.id, plant.id)

    after = (await GetUserQueryHandler(**handler_args).handle({"user_id": user.id})).points
    assert after == before + 15


async def test_record_analysis_event_order(garden, record, publisher):
    user, plant = garden
    publisher.clear_history()

    await record(user.id, plant.id)

    types = [e.event_type for e in publisher.recent_events()]
    assert types[0] == AnalysisRecorded.EVENT_TYPE
    assert types[1] == PlantHealthUpdated.EVENT_TYPE
    assert types.count(TaskCreated.EVENT_TYPE) == 2
    assert types[-1] == PointsGranted.EVENT_TYPE
    sources = {e.data["source"] for e in publisher.recent_events(TaskCreated.EVENT_TYPE)}
    assert sources == {"recommendation"}


async def test_record_analysis_without_advice(garden, record, handler_args):
    user, plant = garden
    await record(user.id, plant.id, issues=[], recommendations=[])

    assert await ListTasksQueryHandler(**handler_args).handle({"user_id": user.id}) == []


async def test_record_analysis_for_missing_plant(garden, record, publisher):
    user, _ = garden
    publisher.clear_history()

    with pytest.raises(PlantNotFoundError):
        await record(user.id, 4040)
    assert publisher.recent_events() == []


async def test_record_analysis_on_someone_elses_plant(garden, make_user, record):
    _, plant = garden
    intruder = await make_user("intruder")
    with pytest.raises(AuthorizationError):
        await record(intruder.id, plant.id)


async def test_record_analysis_rejects_bad_metric(garden, record):
    user, plant = garden
    with pytest.raises(ValidationError):
        await record(user.id, plant.id, pest_risk=-1)


async def test_record_analysis_rejects_unknown_priority(garden, record):
    user, plant = garden
    bad = [{**RECOMMENDATIONS[0], "priority": "someday"}]
    with pytest.raises(ValidationError):
        await record(user.id, plant.id, recommendations=bad)


# ------------------------------------------------------------------
# task generation schedule
# ------------------------------------------------------------------


async def test_generated_task_due_dates(garden, services):
    user, plant = garden
    now = datetime(2026, 3, 14, 8, 30, tzinfo=timezone.utc)
    recommendations = [Recommendation.model_validate(r) for r in RECOMMENDATIONS]

    async with services(users=[user.id], plants=[plant.id]) as (uow, svc):
        tasks = uow.collect(
            await svc.task_generation.materialize_tasks_from_recommendations(
                plant.id, user.id, recommendations, now=now
            )
        )

    assert [t.due_date for t in tasks] == [now + timedelta(hours=24), now + timedelta(hours=72)]
    assert all(t.created_at == now for t in tasks)
    assert [t.description for t in tasks] == ["Water until it drains.", "Balanced fertilizer."]


async def test_due_hours_follow_settings(garden, services, settings):
    user, plant = garden
    settings.URGENT_TASK_DUE_HOURS = 6
    now = datetime(2026, 3, 14, 8, 30, tzinfo=timezone.utc)
    recommendation = Recommendation.model_validate(RECOMMENDATIONS[0])

    async with services(users=[user.id], plants=[plant.id]) as (uow, svc):
        tasks = uow.collect(
            await svc.task_generation.materialize_tasks_from_recommendations(
                plant.id, user.id, [recommendation], now=now
            )
        )

    assert tasks[0].due_date == now + timedelta(hours=6)


# ------------------------------------------------------------------
# reads
# ------------------------------------------------------------------


async def test_latest_analysis_is_newest(garden, record, handler_args):
    user, plant = garden
    await record(user.id, plant.id, health_score=40)
    newest = await record(user.id, plant.id, health_score=85, issues=[], recommendations=[])

    latest = await GetLatestAnalysisQueryHandler(**handler_args).handle(
        {"user_id": user.id, "plant_id": plant.id}
    )
    assert latest.id == newest.id
    assert latest.health_score == 85

    history = await ListAnalysesQueryHandler(**handler_args).handle({"user_id": user.id, "plant_id": plant.id})
    assert [a.health_score for a in history] == [85, 40]


async def test_latest_analysis_goes_by_timestamp_then_id(garden, uow_factory, handler_args):
    user, plant = garden
    base = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
    t1, t2, t3 = base, base + timedelta(hours=1), base + timedelta(hours=2)

    stored = []
    async with uow_factory(users=[user.id], plants=[plant.id]) as uow:
        for score, created_at in ((30, t3), (50, t1), (70, t2), (90, t3)):
            stored.append(
                await uow.analyses.create(
                    PlantAnalysis(
                        plant_id=plant.id,
                        user_id=user.id,
                        created_at=created_at,
                        **{**METRICS, "health_score": score},
                    )
                )
            )

    latest = await GetLatestAnalysisQueryHandler(**handler_args).handle(
        {"user_id": user.id, "plant_id": plant.id}
    )
    assert latest.id == stored[-1].id
    assert latest.health_score == 90
    assert latest.created_at == t3

    history = await ListAnalysesQueryHandler(**handler_args).handle({"user_id": user.id, "plant_id": plant.id})
    assert [a.health_score for a in history] == [90, 30, 70, 50]


async def test_latest_analysis_missing(garden, handler_args):
    user, plant = garden
    with pytest.raises(AnalysisNotFoundError):
        await GetLatestAnalysisQueryHandler(**handler_args).handle({"user_id": user.id, "plant_id": plant.id})
