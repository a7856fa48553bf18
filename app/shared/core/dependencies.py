"""
Application dependencies for Plant Care Application.
Wires domain services onto a unit of work and provides the base class
shared by every command and query handler.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.modules.care_management.domain.services.task_generation_service import TaskGenerationService
from app.modules.care_management.domain.services.task_service import TaskService
from app.modules.gamification.domain.services.badge_service import BadgeService
from app.modules.health_monitoring.domain.services.analysis_service import AnalysisService
from app.modules.notification_communication.domain.services.notification_service import NotificationService
from app.modules.plant_management.domain.services.plant_service import PlantService
from app.modules.user_management.domain.services.points_service import PointsService
from app.modules.user_management.domain.services.user_service import UserService
from app.shared.config.settings import Settings, get_settings
from app.shared.infrastructure.database.unit_of_work import UnitOfWork, UnitOfWorkFactory

from .exceptions import AuthorizationError, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass
class DomainServices:
    """Domain services bound to the repositories of one unit of work."""
    users: UserService
    points: PointsService
    notifications: NotificationService
    badges: BadgeService
    task_generation: TaskGenerationService
    tasks: TaskService
    plants: PlantService
    analyses: AnalysisService


def build_domain_services(uow: UnitOfWork, settings: Optional[Settings] = None) -> DomainServices:
    """
    Build the domain services for an open unit of work.

    Args:
        uow: Entered unit of work providing the repositories
        settings: Gamification and scheduling parameters

    Returns:
        DomainServices sharing the unit of work's session
    """
    settings = settings or get_settings()

    points = PointsService(uow.users, settings.POINTS_PER_LEVEL)
    notifications = NotificationService(uow.notifications, uow.plants)
    badges = BadgeService(uow.badges, uow.users, uow.plants, uow.tasks, notifications, points)
    task_generation = TaskGenerationService(
        uow.tasks,
        points,
        badges,
        task_completion_points=settings.TASK_COMPLETION_POINTS,
        urgent_due_hours=settings.URGENT_TASK_DUE_HOURS,
        recommended_due_hours=settings.RECOMMENDED_TASK_DUE_HOURS,
    )
    plants = PlantService(uow.plants, uow.tasks, uow.users, badges)

    return DomainServices(
        users=UserService(uow.users),
        points=points,
        notifications=notifications,
        badges=badges,
        task_generation=task_generation,
        tasks=TaskService(uow.tasks, uow.plants, task_generation),
        plants=plants,
        analyses=AnalysisService(
            uow.analyses,
            plants,
            task_generation,
            notifications,
            points,
            analysis_points=settings.ANALYSIS_POINTS,
        ),
    )


# Unit of work factory singleton
_uow_factory: Optional[UnitOfWorkFactory] = None


def get_unit_of_work_factory() -> UnitOfWorkFactory:
    """
    Get the application's unit of work factory.

    Returns:
        UnitOfWorkFactory: Shared factory (session manager, publisher, locks)
    """
    global _uow_factory
    if _uow_factory is None:
        _uow_factory = UnitOfWorkFactory()
    return _uow_factory


def configure_unit_of_work_factory(factory: Optional[UnitOfWorkFactory]) -> None:
    """Replace the shared factory, e.g. after the database is re-initialised."""
    global _uow_factory
    _uow_factory = factory


class HandlerBase:
    """
    Base class for command and query handlers.

    Each handle() call opens its own unit of work, so one call is one
    transaction.
    """

    def __init__(
        self,
        uow_factory: Optional[UnitOfWorkFactory] = None,
        settings: Optional[Settings] = None,
    ):
        self._uow_factory = uow_factory or get_unit_of_work_factory()
        self._settings = settings or get_settings()

    def _services(self, uow: UnitOfWork) -> DomainServices:
        return build_domain_services(uow, self._settings)

    @staticmethod
    def _parse(message_cls: Type[M], message: Union[M, Dict[str, Any]]) -> M:
        """
        Accept a message instance or its raw dict form.

        Raises:
            ValidationError: If the payload does not validate
        """
        if isinstance(message, message_cls):
            return message
        try:
            return message_cls.model_validate(message)
        except PydanticValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            first = errors[0] if errors else {}
            field = ".".join(str(part) for part in first.get("loc", ())) or None
            raise ValidationError(
                message=f"Invalid {message_cls.__name__}: {first.get('msg', 'validation failed')}",
                field=field,
                details={"errors": [{**error, "loc": list(error.get("loc", ()))} for error in errors]}
            ) from e

    @staticmethod
    def _ensure_owner(entity: Any, user_id: int, resource_type: str) -> None:
        """
        Raises:
            AuthorizationError: If the acting user does not own the entity
        """
        if not entity.is_owned_by(user_id):
            logger.warning(f"User {user_id} denied access to {resource_type} {entity.id}")
            raise AuthorizationError(
                message=f"Not allowed to modify this {resource_type}",
                resource_type=resource_type,
                resource_id=entity.id,
                user_id=user_id
            )
