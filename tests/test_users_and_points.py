"""Tests for registration and the points / level ledger."""

from __future__ import annotations

import pytest

from app.modules.user_management.application.handlers.command_handlers import GrantPointsCommandHandler
from app.modules.user_management.application.handlers.query_handlers import GetUserQueryHandler
from app.modules.user_management.domain.events.user_events import PointsGranted, UserLeveledUp, UserRegistered
from app.modules.user_management.domain.models.user import User, level_for_points
from app.shared.core.exceptions import DuplicateResourceError, UserNotFoundError, ValidationError

# ------------------------------------------------------------------
# level arithmetic
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "points, expected_level",
    [(0, 1), (99, 1), (100, 2), (199, 2), (250, 3), (1000, 11)],
)
def test_level_for_points(points, expected_level):
    assert level_for_points(points) == expected_level


def test_level_for_points_custom_step():
    assert level_for_points(149, points_per_level=50) == 3


def test_grant_never_lowers_level():
    user = User(username="fern", password_hash="hash", level=5, points=120)
    previous, current = user.grant_points(10)
    assert (previous, current) == (5, 5)
    assert user.points == 130


def test_grant_rejects_negative_amount():
    user = User(username="fern", password_hash="hash")
    with pytest.raises(ValueError):
        user.grant_points(-1)


def test_password_is_hashed():
    user = User.create_new_user("fern", "plain-password")
    assert user.password_hash != "plain-password"
    assert user.verify_password("plain-password")
    assert not user.verify_password("wrong")


# ------------------------------------------------------------------
# registration
# ------------------------------------------------------------------


async def test_register_user_starts_at_level_one(make_user, publisher):
    user = await make_user("rose")

    assert user.id is not None
    assert user.level == 1
    assert user.points == 0
    assert [e.event_type for e in publisher.recent_events()] == [UserRegistered.EVENT_TYPE]


async def test_register_duplicate_username(make_user):
    await make_user("rose")
    with pytest.raises(DuplicateResourceError):
        await make_user("rose")


async def test_register_rejects_empty_payload(make_user):
    with pytest.raises(ValidationError):
        await make_user("", "password")


async def test_get_unknown_user(handler_args):
    with pytest.raises(UserNotFoundError):
        await GetUserQueryHandler(**handler_args).handle({"user_id": 999})


# ------------------------------------------------------------------
# grants
# ------------------------------------------------------------------


async def test_grant_points_levels_up(make_user, handler_args, publisher):
    user = await make_user()
    publisher.clear_history()

    updated = await GrantPointsCommandHandler(**handler_args).handle(
        {"user_id": user.id, "amount": 120, "reason": "manual"}
    )

    assert updated.points == 120
    assert updated.level == 2
    assert [e.event_type for e in publisher.recent_events()] == [
        PointsGranted.EVENT_TYPE,
        UserLeveledUp.EVENT_TYPE,
    ]
    level_up = publisher.recent_events(UserLeveledUp.EVENT_TYPE)[0]
    assert level_up.data == {"previous_level": 1, "new_level": 2, "user_id": user.id}


async def test_level_matches_points_after_many_grants(make_user, handler_args):
    user = await make_user()
    handler = GrantPointsCommandHandler(**handler_args)

    levels = []
    for amount in (15, 40, 45, 0, 99, 1):
        user = await handler.handle({"user_id": user.id, "amount": amount})
        levels.append(user.level)
        assert user.level == level_for_points(user.points)

    assert user.points == 200
    assert levels == sorted(levels)


async def test_zero_point_grant_still_recorded(make_user, handler_args, publisher):
    user = await make_user()
    publisher.clear_history()

    await GrantPointsCommandHandler(**handler_args).handle({"user_id": user.id, "amount": 0})

    granted = publisher.recent_events(PointsGranted.EVENT_TYPE)
    assert len(granted) == 1
    assert granted[0].amount == 0


async def test_negative_grant_is_rejected(make_user, handler_args):
    user = await make_user()
    with pytest.raises(ValidationError):
        await GrantPointsCommandHandler(**handler_args).handle({"user_id": user.id, "amount": -5})


async def test_grant_to_unknown_user(handler_args):
    with pytest.raises(UserNotFoundError):
        await GrantPointsCommandHandler(**handler_args).handle({"user_id": 4242, "amount": 5})


async def test_points_service_rejects_non_integer(make_user, services):
    user = await make_user()
    async with services(users=[user.id]) as (_, svc):
        with pytest.raises(ValidationError):
            await svc.points.grant_points(user.id, 2.5)
