"""Shared fixtures: an in-memory SQLite engine per test, a seeded badge
catalog and small helpers that go through the regular command handlers."""

from __future__ import annotations

import pytest

from app.modules.gamification.infrastructure.seed import seed_badge_catalog
from app.modules.plant_management.application.handlers.command_handlers import CreatePlantCommandHandler
from app.modules.user_management.application.handlers.command_handlers import RegisterUserCommandHandler
from app.shared.config.settings import Settings
from app.shared.core.dependencies import build_domain_services, configure_unit_of_work_factory
from app.shared.core.locks import AggregateLockRegistry
from app.shared.events.publisher import EventPublisher
from app.shared.infrastructure.database.connection import DatabaseConnectionManager
from app.shared.infrastructure.database.session import DatabaseSessionManager
from app.shared.infrastructure.database.unit_of_work import UnitOfWorkFactory

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL=SQLITE_MEMORY_URL,
        LOG_FORMAT="text",
        LOG_LEVEL="DEBUG",
        DB_CREATE_TABLES=True,
        SEED_DEMO_GARDEN=False,
    )


@pytest.fixture
def publisher() -> EventPublisher:
    return EventPublisher()


@pytest.fixture
async def db_manager(settings):
    manager = DatabaseConnectionManager(settings=settings, database_url=SQLITE_MEMORY_URL)
    await manager.initialize()
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
async def uow_factory(db_manager, publisher):
    factory = UnitOfWorkFactory(
        session_manager=DatabaseSessionManager(db_manager.session_maker),
        publisher=publisher,
        locks=AggregateLockRegistry(),
    )
    async with factory() as uow:
        await seed_badge_catalog(uow.badges)
    configure_unit_of_work_factory(factory)
    publisher.clear_history()
    yield factory
    configure_unit_of_work_factory(None)


@pytest.fixture
def handler_args(uow_factory, settings):
    return {"uow_factory": uow_factory, "settings": settings}


@pytest.fixture
def make_user(handler_args):
    async def _make_user(username: str = "gardener", password: str = "s3cret-pass"):
        return await RegisterUserCommandHandler(**handler_args).handle(
            {"username": username, "password": password}
        )

    return _make_user


@pytest.fixture
def make_plant(handler_args):
    async def _make_plant(user_id: int, name: str = "Monstera", species: str = "Monstera Deliciosa"):
        return await CreatePlantCommandHandler(**handler_args).handle(
            {"user_id": user_id, "name": name, "species": species}
        )

    return _make_plant


@pytest.fixture
def services(uow_factory, settings):
    """Open a unit of work and hand back (uow, services) for direct domain calls."""

    class _Scope:
        def __init__(self, **lock_kwargs):
            self._uow = uow_factory(**lock_kwargs)

        async def __aenter__(self):
            uow = await self._uow.__aenter__()
            return uow, build_domain_services(uow, settings)

        async def __aexit__(self, exc_type, exc, tb):
            return await self._uow.__aexit__(exc_type, exc, tb)

    return _Scope
