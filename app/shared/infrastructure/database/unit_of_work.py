# 📄 File: app/shared/infrastructure/database/unit_of_work.py
#
# 🧭 Purpose (Layman Explanation):
# Bundles one user action (recording an analysis, completing a task) into a single all-or-nothing
# change: either every resulting task, notification, badge and point is saved, or none of them is.
#
# 🧪 Purpose (Technical Summary):
# Unit of work over one AsyncSession: holds per-aggregate locks, exposes the module
# repositories bound to the session, collects domain events from Outcomes and
# publishes them only after the transaction commits.
#
# 🔗 Dependencies:
# - app/shared/infrastructure/database/session.py (commit/rollback handling)
# - app/shared/core/locks.py (per-aggregate locks)
# - app/shared/events (Outcome, EventPublisher)
# - Module repository implementations
#
# 🔄 Connected Modules / Calls From:
# - Application command and query handlers of every module
# - app/shared/core/dependencies.py (factory wiring)
# - app/bootstrap.py (demo garden seeding)

import logging
from contextlib import AsyncExitStack
from typing import Any, Iterable, List, Optional
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_management.infrastructure.database.task_repository_impl import TaskRepositoryImpl
from app.modules.gamification.infrastructure.database.badge_repository_impl import BadgeRepositoryImpl
from app.modules.health_monitoring.infrastructure.database.analysis_repository_impl import AnalysisRepositoryImpl
from app.modules.notification_communication.infrastructure.database.notification_repository_impl import (
    NotificationRepositoryImpl,
)
from app.modules.plant_management.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.shared.core.locks import AggregateLockRegistry, LockKey
from app.shared.events.base import DomainEvent, Outcome
from app.shared.events.publisher import EventPublisher
from app.shared.infrastructure.database.session import DatabaseSessionManager
from app.shared.utils.logging import log_context

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    One command, one transaction.

    Usage:
        async with uow_factory(users=[user_id], plants=[plant_id]) as uow:
            plant = uow.collect(await service.do_something(...))

    Locks are taken before the session opens and released after it
    closes. Events collected during the block are published once the
    commit has succeeded; a rolled-back block publishes nothing.
    """

    def __init__(
        self,
        session_manager: DatabaseSessionManager,
        publisher: EventPublisher,
        locks: AggregateLockRegistry,
        lock_keys: Iterable[LockKey] = (),
        acting_user_id: Optional[int] = None,
    ):
        self._session_manager = session_manager
        self._publisher = publisher
        self._locks = locks
        self._lock_keys = list(lock_keys)
        self.acting_user_id = acting_user_id
        self.correlation_id = str(uuid4())
        self._events: List[DomainEvent] = []
        self._stack: Optional[AsyncExitStack] = None
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> "UnitOfWork":
        self._stack = AsyncExitStack()
        try:
            self._stack.enter_context(
                log_context(user_id=self.acting_user_id, correlation_id=self.correlation_id)
            )
            await self._stack.enter_async_context(self._locks.hold(self._lock_keys))
            self.session = await self._stack.enter_async_context(self._session_manager.get_session())
        except BaseException:
            await self._stack.aclose()
            raise

        self.users = UserRepositoryImpl(self.session)
        self.plants = PlantRepositoryImpl(self.session)
        self.tasks = TaskRepositoryImpl(self.session)
        self.analyses = AnalysisRepositoryImpl(self.session)
        self.badges = BadgeRepositoryImpl(self.session)
        self.notifications = NotificationRepositoryImpl(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        stack, self._stack = self._stack, None
        try:
            await stack.__aexit__(exc_type, exc, tb)
        except BaseException:
            if self._events:
                logger.info(f"Discarding {len(self._events)} events from rolled back command {self.correlation_id}")
            self._events.clear()
            raise

        if exc_type is not None:
            self._events.clear()
            return False

        events, self._events = self._events, []
        for event in events:
            event.set_correlation_id(self.correlation_id)
        await self._publisher.publish_all(events)
        if events:
            logger.debug(f"Command {self.correlation_id} published {len(events)} events")
        return False

    def collect(self, outcome: Outcome) -> Any:
        """Record an outcome's events for publication and return its value."""
        self._events.extend(outcome.events)
        return outcome.value

    @property
    def pending_events(self) -> List[DomainEvent]:
        return list(self._events)


class UnitOfWorkFactory:
    """
    Creates units of work sharing one session manager, publisher and lock registry.
    """

    def __init__(
        self,
        session_manager: Optional[DatabaseSessionManager] = None,
        publisher: Optional[EventPublisher] = None,
        locks: Optional[AggregateLockRegistry] = None,
    ):
        self.session_manager = session_manager or DatabaseSessionManager()
        self.publisher = publisher or EventPublisher()
        self.locks = locks or AggregateLockRegistry()

    def __call__(
        self,
        users: Iterable[Optional[int]] = (),
        plants: Iterable[Optional[int]] = (),
    ) -> UnitOfWork:
        """
        Build a unit of work locking the given users and plants.

        Args:
            users: Ids of users whose rows the command mutates
            plants: Ids of plants the command mutates
        """
        user_ids = [user_id for user_id in users if user_id is not None]
        lock_keys = [("user", user_id) for user_id in user_ids]
        lock_keys += [("plant", plant_id) for plant_id in plants if plant_id is not None]
        return UnitOfWork(
            session_manager=self.session_manager,
            publisher=self.publisher,
            locks=self.locks,
            lock_keys=lock_keys,
            acting_user_id=user_ids[0] if user_ids else None,
        )
