"""Tests for transactional boundaries, after-commit publishing and aggregate locks."""

from __future__ import annotations

import asyncio

import pytest

from app.modules.plant_management.application.handlers.command_handlers import CreatePlantCommandHandler
from app.modules.user_management.application.handlers.query_handlers import GetUserQueryHandler
from app.modules.user_management.domain.events.user_events import PointsGranted, UserRegistered
from app.shared.core.exceptions import TransactionError, UserNotFoundError
from app.shared.core.locks import AggregateLockRegistry
from app.shared.events.base import EventHandler, Outcome


class _Boom(RuntimeError):
    pass


# ------------------------------------------------------------------
# transactions
# ------------------------------------------------------------------


async def test_failed_command_persists_and_publishes_nothing(uow_factory, services, publisher):
    with pytest.raises(TransactionError) as raised:
        async with services() as (uow, svc):
            uow.collect(await svc.users.register_user("ghost", "boo-boo-boo"))
            assert len(uow.pending_events) == 1
            raise _Boom()

    assert isinstance(raised.value.__cause__, _Boom)
    assert publisher.recent_events() == []
    async with uow_factory() as uow:
        assert await uow.users.get_by_username("ghost") is None


async def test_events_publish_after_commit_in_order(make_user, handler_args, publisher):
    user = await make_user()
    publisher.clear_history()

    await CreatePlantCommandHandler(**handler_args).handle({"user_id": user.id, "name": "Pothos"})

    events = publisher.recent_events()
    assert events[0].event_type == "plant.created"
    assert events[-1].event_type == PointsGranted.EVENT_TYPE
    correlation_ids = {event.metadata.correlation_id for event in events}
    assert len(correlation_ids) == 1
    assert None not in correlation_ids


async def test_each_command_gets_its_own_correlation_id(make_user, publisher):
    await make_user("one")
    await make_user("two")

    registered = publisher.recent_events(UserRegistered.EVENT_TYPE)
    assert len(registered) == 2
    assert registered[0].metadata.correlation_id != registered[1].metadata.correlation_id


async def test_failure_mid_pipeline_rolls_back_earlier_steps(make_user, services, handler_args, publisher):
    user = await make_user()
    publisher.clear_history()

    with pytest.raises(UserNotFoundError):
        async with services(users=[user.id, 9999]) as (uow, svc):
            uow.collect(await svc.points.grant_points(user.id, 40, reason="first"))
            uow.collect(await svc.points.grant_points(9999, 40, reason="second"))

    refreshed = await GetUserQueryHandler(**handler_args).handle({"user_id": user.id})
    assert refreshed.points == 0
    assert publisher.recent_events() == []


# ------------------------------------------------------------------
# publisher
# ------------------------------------------------------------------


class _Recorder(EventHandler):
    def __init__(self):
        self.seen = []

    async def handle(self, event):
        self.seen.append(event.event_type)
        return True

    def can_handle(self, event_type):
        return event_type.startswith("user.")


async def test_failing_subscriber_does_not_block_others(make_user, publisher):
    def explode(event):
        raise RuntimeError("subscriber down")

    recorder = _Recorder()
    publisher.subscribe(UserRegistered.EVENT_TYPE, explode)
    publisher.subscribe("*", recorder)

    user = await make_user()

    assert user.id is not None
    assert recorder.seen == [UserRegistered.EVENT_TYPE]
    assert publisher.failed_count == 1
    assert publisher.history[-1].delivered_to == 1
    assert publisher.history[-1].failed_handlers == 1


async def test_wildcard_handler_filters_by_type(make_user, make_plant, publisher):
    recorder = _Recorder()
    publisher.subscribe("*", recorder)

    user = await make_user()
    await make_plant(user.id)

    assert all(event_type.startswith("user.") for event_type in recorder.seen)
    assert PointsGranted.EVENT_TYPE in recorder.seen


def test_outcome_absorb_keeps_order():
    outcome = Outcome(value="outer")
    inner = Outcome(value=42, events=[UserRegistered(1, "fern")])

    assert outcome.absorb(inner) == 42
    assert outcome.event_types == [UserRegistered.EVENT_TYPE]


# ------------------------------------------------------------------
# locks
# ------------------------------------------------------------------


def test_lock_keys_are_ordered_and_deduplicated():
    keys = [("plant", 3), ("user", 7), ("plant", 1), ("user", 2), ("user", 7), ("plant", None)]
    assert AggregateLockRegistry.ordered(keys) == [("user", 2), ("user", 7), ("plant", 1), ("plant", 3)]


async def test_hold_serializes_commands_on_same_aggregate():
    registry = AggregateLockRegistry()
    timeline = []

    async def command(name: str):
        async with registry.hold([("user", 1)]):
            timeline.append(f"{name}:start")
            await asyncio.sleep(0.01)
            timeline.append(f"{name}:end")

    await asyncio.gather(command("a"), command("b"))

    assert timeline in (
        ["a:start", "a:end", "b:start", "b:end"],
        ["b:start", "b:end", "a:start", "a:end"],
    )


async def test_hold_releases_locks_on_error():
    registry = AggregateLockRegistry()
    with pytest.raises(_Boom):
        async with registry.hold([("user", 1), ("plant", 2)]):
            raise _Boom()

    assert not registry.lock_for("user", 1).locked()
    assert not registry.lock_for("plant", 2).locked()


async def test_released_locks_are_dropped():
    registry = AggregateLockRegistry()
    for plant_id in range(1, 1001):
        async with registry.hold([("user", 1), ("plant", plant_id)]):
            assert len(registry) == 2

    assert len(registry) == 0


async def test_waiting_command_keeps_lock_alive():
    registry = AggregateLockRegistry()
    entered = asyncio.Event()
    release = asyncio.Event()

    async def holder():
        async with registry.hold([("plant", 9)]):
            entered.set()
            await release.wait()

    async def waiter():
        async with registry.hold([("plant", 9)]):
            return len(registry)

    holding = asyncio.create_task(holder())
    await entered.wait()
    waiting = asyncio.create_task(waiter())
    await asyncio.sleep(0)
    assert len(registry) == 1
    release.set()

    assert await waiting == 1
    await holding
    assert len(registry) == 0


async def test_concurrent_grants_do_not_lose_updates(make_user, uow_factory, services, handler_args):
    user = await make_user()

    async def grant():
        async with services(users=[user.id]) as (uow, svc):
            uow.collect(await svc.points.grant_points(user.id, 5, reason="race"))

    await asyncio.gather(*(grant() for _ in range(10)))

    refreshed = await GetUserQueryHandler(**handler_args).handle({"user_id": user.id})
    assert refreshed.points == 50
