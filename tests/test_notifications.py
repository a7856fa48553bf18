"""Tests for notification creation, listing and the read flag."""

from __future__ import annotations

import pytest

from app.modules.health_monitoring.domain.models.analysis import PlantIssue
from app.modules.notification_communication.application.handlers.command_handlers import (
    MarkNotificationReadCommandHandler,
)
from app.modules.notification_communication.application.handlers.query_handlers import (
    ListNotificationsQueryHandler,
)
from app.modules.notification_communication.domain.events.notification_events import (
    NotificationCreated,
    NotificationRead,
)
from app.modules.notification_communication.domain.models.notification import Notification, NotificationType
from app.shared.core.exceptions import AuthorizationError, NotificationNotFoundError


def test_notification_starts_unread():
    notification = Notification(user_id=1, title="Tip", message="Rotate weekly", type=NotificationType.TIP)
    assert notification.read is False
    assert notification.type == "tip"


@pytest.fixture
def notify(services):
    async def _notify(user_id: int, title: str, notification_type=NotificationType.TIP):
        async with services(users=[user_id]) as (uow, svc):
            return uow.collect(
                await svc.notifications.create_notification(user_id, title, f"{title} body", notification_type)
            )

    return _notify


async def test_create_notification_publishes_event(make_user, notify, publisher):
    user = await make_user()
    publisher.clear_history()

    notification = await notify(user.id, "Rotate your plants")

    assert notification.id is not None
    created = publisher.recent_events(NotificationCreated.EVENT_TYPE)
    assert len(created) == 1
    assert created[0].user_id == user.id


async def test_list_is_newest_first_and_per_user(make_user, notify, handler_args):
    alice = await make_user("alice")
    bob = await make_user("bob")
    await notify(alice.id, "first")
    await notify(bob.id, "not yours")
    await notify(alice.id, "second")

    notifications = await ListNotificationsQueryHandler(**handler_args).handle({"user_id": alice.id})
    assert [n.title for n in notifications] == ["second", "first"]


async def test_mark_read_is_idempotent(make_user, notify, handler_args, publisher):
    user = await make_user()
    notification = await notify(user.id, "Mist the fern")
    handler = MarkNotificationReadCommandHandler(**handler_args)
    publisher.clear_history()

    first = await handler.handle({"user_id": user.id, "notification_id": notification.id})
    second = await handler.handle({"user_id": user.id, "notification_id": notification.id})

    assert first.read is True
    assert second.read is True
    assert len(publisher.recent_events(NotificationRead.EVENT_TYPE)) == 1


async def test_mark_someone_elses_notification(make_user, notify, handler_args):
    owner = await make_user("owner")
    intruder = await make_user("intruder")
    notification = await notify(owner.id, "Private")

    with pytest.raises(AuthorizationError):
        await MarkNotificationReadCommandHandler(**handler_args).handle(
            {"user_id": intruder.id, "notification_id": notification.id}
        )

    notifications = await ListNotificationsQueryHandler(**handler_args).handle({"user_id": owner.id})
    assert notifications[0].read is False


async def test_mark_missing_notification(make_user, handler_args):
    user = await make_user()
    with pytest.raises(NotificationNotFoundError):
        await MarkNotificationReadCommandHandler(**handler_args).handle(
            {"user_id": user.id, "notification_id": 999}
        )


async def test_issue_notifications_skip_missing_plant(make_user, services):
    user = await make_user()
    issues = [PlantIssue(name="Root Rot", description="Soggy soil")]

    async with services(users=[user.id]) as (uow, svc):
        created = uow.collect(await svc.notifications.emit_issue_notifications(555, user.id, issues))

    assert created == []
