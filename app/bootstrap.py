# 📄 File: app/bootstrap.py
# 🧭 Purpose (Layman Explanation):
# Starts and stops the plant care engine: sets up logging, opens the database, makes sure the
# badge list exists and, when asked, plants a small demo garden so there is something to look at.
#
# 🧪 Purpose (Technical Summary):
# Process lifecycle hooks. startup() configures logging, initializes the global database manager,
# optionally creates tables, seeds the badge catalog, installs the shared UnitOfWorkFactory and
# optionally seeds demo data through the regular command handlers. shutdown() disposes the engine.
#
# 🔗 Dependencies:
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection, session, unit of work)
# - app.modules.*.application.handlers (demo data goes through the same paths as user calls)
# - app.shared.utils.logging
#
# 🔄 Connected Modules / Calls From:
# - Process entry points and tests

__all__ = [
    "startup",
    "shutdown",
    "seed_demo_garden",
    "DEMO_USERNAME",
]

import logging
from typing import Optional

from app.modules.care_management.application.handlers.command_handlers import CreateTaskCommandHandler
from app.modules.gamification.infrastructure.seed import seed_badge_catalog
from app.modules.health_monitoring.application.handlers.command_handlers import RecordAnalysisCommandHandler
from app.modules.notification_communication.domain.models.notification import NotificationType
from app.modules.plant_management.application.handlers.command_handlers import (
    CreatePlantCommandHandler,
    UpdatePlantCommandHandler,
)
from app.modules.user_management.application.handlers.command_handlers import RegisterUserCommandHandler
from app.modules.user_management.domain.models.user import User
from app.shared.config.settings import Settings, get_settings
from app.shared.core.dependencies import build_domain_services, configure_unit_of_work_factory
from app.shared.events.publisher import EventPublisher
from app.shared.infrastructure.database.connection import close_database, init_database
from app.shared.infrastructure.database.session import DatabaseSessionManager
from app.shared.infrastructure.database.unit_of_work import UnitOfWorkFactory
from app.shared.utils.helpers import utc_now
from app.shared.utils.logging import log_shutdown_event, log_startup_event, setup_logging

logger = logging.getLogger(__name__)

DEMO_USERNAME = "plantlover"
DEMO_PASSWORD = "password"

MONSTERA_IMAGE = "https://images.unsplash.com/photo-1614594975525-e45190c55d0b?auto=format&fit=crop&w=400&h=300"
SNAKE_PLANT_IMAGE = "https://images.unsplash.com/photo-1620127252536-03bdfcf6d5c3?auto=format&fit=crop&w=400&h=300"


async def startup(settings: Optional[Settings] = None, publisher: Optional[EventPublisher] = None) -> UnitOfWorkFactory:
    """
    Bring the engine up and return the installed unit of work factory.
    """
    settings = settings or get_settings()
    setup_logging(
        log_level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        log_file=settings.LOG_FILE,
    )
    log_startup_event(settings.APP_NAME, settings.APP_VERSION, extra={"environment": settings.ENVIRONMENT})

    manager = await init_database(settings=settings)
    if settings.DB_CREATE_TABLES:
        await manager.create_tables()

    uow_factory = UnitOfWorkFactory(
        session_manager=DatabaseSessionManager(manager.session_maker),
        publisher=publisher or EventPublisher(),
    )
    configure_unit_of_work_factory(uow_factory)

    async with uow_factory() as uow:
        await seed_badge_catalog(uow.badges)

    if settings.SEED_DEMO_GARDEN:
        await seed_demo_garden(uow_factory, settings)

    logger.info("Startup complete")
    return uow_factory


async def shutdown(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    configure_unit_of_work_factory(None)
    await close_database()
    log_shutdown_event(settings.APP_NAME)


async def seed_demo_garden(uow_factory: UnitOfWorkFactory, settings: Optional[Settings] = None) -> Optional[User]:
    """
    Create the demo user with two plants, two open tasks, a tip and one analysis.

    Does nothing when the demo user already exists.

    Returns:
        The demo user, or None when it was already there
    """
    async with uow_factory() as uow:
        if await uow.users.get_by_username(DEMO_USERNAME) is not None:
            logger.info("Demo garden already present, skipping")
            return None

    handler_args = dict(uow_factory=uow_factory, settings=settings)
    user = await RegisterUserCommandHandler(**handler_args).handle(
        {"username": DEMO_USERNAME, "password": DEMO_PASSWORD}
    )

    create_plant = CreatePlantCommandHandler(**handler_args)
    update_plant = UpdatePlantCommandHandler(**handler_args)
    create_task = CreateTaskCommandHandler(**handler_args)

    monstera = await create_plant.handle(
        {"user_id": user.id, "name": "Monstera", "species": "Monstera Deliciosa", "image_url": MONSTERA_IMAGE}
    )
    snake_plant = await create_plant.handle(
        {"user_id": user.id, "name": "Snake Plant", "species": "Sansevieria", "image_url": SNAKE_PLANT_IMAGE}
    )
    await update_plant.handle({"user_id": user.id, "plant_id": monstera.id, "water_level": 25, "health_score": 60})
    await update_plant.handle({"user_id": user.id, "plant_id": snake_plant.id, "light_level": 50, "health_score": 75})

    now = utc_now()
    await create_task.handle({
        "user_id": user.id,
        "plant_id": monstera.id,
        "title": "Water Monstera",
        "description": "Last watered 9 days ago",
        "type": "water",
        "priority": "urgent",
        "due_date": now,
    })
    await create_task.handle({
        "user_id": user.id,
        "plant_id": snake_plant.id,
        "title": "Move Snake Plant",
        "description": "Direct sunlight is too intense",
        "type": "move",
        "priority": "high",
        "due_date": now,
    })

    async with uow_factory(users=[user.id]) as uow:
        uow.collect(
            await build_domain_services(uow, settings).notifications.create_notification(
                user.id,
                "Tip of the Day",
                "Mist your tropical plants regularly to increase humidity.",
                NotificationType.TIP,
            )
        )

    await RecordAnalysisCommandHandler(**handler_args).handle({
        "user_id": user.id,
        "plant_id": monstera.id,
        "health_score": 60,
        "water_level": 20,
        "light_level": 80,
        "nutrient_level": 40,
        "pest_risk": 20,
        "image_url": MONSTERA_IMAGE,
        "issues": [
            {
                "name": "Dehydration",
                "description": "Your plant needs water urgently. The soil is very dry.",
                "icon": "water_drop",
            },
            {
                "name": "Nutrient Deficiency",
                "description": "Yellowing leaves indicate a lack of nutrients.",
                "icon": "grass",
            },
        ],
        "recommendations": [
            {
                "title": "Water Thoroughly",
                "description": "Your plant is severely dehydrated. Water until you see it drain from the bottom.",
                "priority": "urgent",
                "type": "water",
                "icon": "water_drop",
                "tip": "For Monsteras, wait until the top 2 inches of soil is dry before watering again.",
            },
            {
                "title": "Apply Fertilizer",
                "description": "Yellowing leaves indicate your plant needs nutrients. Apply a balanced fertilizer within 3 days.",
                "priority": "recommended",
                "type": "fertilize",
                "icon": "grass",
            },
            {
                "title": "Clean Leaves",
                "description": "Wipe dust from leaves every 2 weeks to help your plant breathe better.",
                "priority": "maintenance",
                "type": "clean",
                "icon": "cleaning_services",
            },
            {
                "title": "Consider Repotting",
                "description": "Your plant might need a larger pot in the next 3-4 months.",
                "priority": "maintenance",
                "type": "repot",
                "icon": "format_color_fill",
            },
        ],
    })

    logger.info(f"Seeded demo garden for user {user.id}")
    return user
