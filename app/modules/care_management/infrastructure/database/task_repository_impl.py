# 📄 File: app/modules/care_management/infrastructure/database/task_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for care tasks, including counting how many
# watering tasks a user has finished.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of TaskRepository using SQLAlchemy async ORM,
# mapping between TaskModel rows and Task domain entities with error translation.
#
# 🔗 Dependencies:
# - app.modules.care_management.domain.repositories.task_repository (interface)
# - app.modules.care_management.infrastructure.database.models (SQLAlchemy models)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.unit_of_work (repository wiring)

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_management.domain.models.task import MUTABLE_TASK_FIELDS, Task
from app.modules.care_management.domain.repositories.task_repository import TaskRepository
from app.modules.care_management.infrastructure.database.models import TaskModel
from app.shared.core.exceptions import RepositoryError, TaskNotFoundError
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class TaskRepositoryImpl(TaskRepository):
    """
    SQLAlchemy implementation of the TaskRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, task: Task) -> Task:
        try:
            task_model = self._domain_to_model(task)

            self._session.add(task_model)
            await self._session.flush()

            logger.debug(f"Created task with ID: {task_model.id}")
            return self._model_to_domain(task_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error during task creation: {str(e)}")
            raise RepositoryError(
                message="Failed to create task",
                operation="create",
                entity="task",
                details={"error": str(e)}
            ) from e

    async def get_by_id(self, task_id: int) -> Optional[Task]:
        try:
            task_model = await self._session.get(TaskModel, task_id)
            return self._model_to_domain(task_model) if task_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving task {task_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to retrieve task",
                operation="get_by_id",
                entity="task",
                details={"error": str(e)}
            ) from e

    async def list_by_user(self, user_id: int) -> List[Task]:
        stmt = (
            select(TaskModel)
            .where(TaskModel.user_id == user_id)
            .order_by(TaskModel.due_date.is_(None), TaskModel.due_date.asc(), TaskModel.id.asc())
        )
        return await self._list(stmt, "list_by_user")

    async def list_by_plant(self, plant_id: int) -> List[Task]:
        stmt = (
            select(TaskModel)
            .where(TaskModel.plant_id == plant_id)
            .order_by(TaskModel.due_date.is_(None), TaskModel.due_date.asc(), TaskModel.id.asc())
        )
        return await self._list(stmt, "list_by_plant")

    async def update(self, task: Task) -> Task:
        try:
            task_model = await self._session.get(TaskModel, task.id)
            if task_model is None:
                raise TaskNotFoundError(task.id)

            for column in MUTABLE_TASK_FIELDS:
                setattr(task_model, column, getattr(task, column))
            await self._session.flush()

            return self._model_to_domain(task_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating task {task.id}: {str(e)}")
            raise RepositoryError(
                message="Failed to update task",
                operation="update",
                entity="task",
                details={"error": str(e)}
            ) from e

    async def delete(self, task_id: int) -> bool:
        try:
            result = await self._session.execute(delete(TaskModel).where(TaskModel.id == task_id))
            return result.rowcount > 0

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting task {task_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to delete task",
                operation="delete",
                entity="task",
                details={"error": str(e)}
            ) from e

    async def delete_by_plant(self, plant_id: int) -> int:
        try:
            result = await self._session.execute(delete(TaskModel).where(TaskModel.plant_id == plant_id))
            logger.debug(f"Deleted {result.rowcount} tasks of plant {plant_id}")
            return result.rowcount

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting tasks of plant {plant_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to delete plant tasks",
                operation="delete_by_plant",
                entity="task",
                details={"error": str(e)}
            ) from e

    async def count_completed_by_type(self, user_id: int, task_type: str) -> int:
        try:
            stmt = select(func.count(TaskModel.id)).where(
                TaskModel.user_id == user_id,
                TaskModel.type == task_type,
                TaskModel.completed.is_(True),
            )
            result = await self._session.execute(stmt)
            return result.scalar_one()

        except SQLAlchemyError as e:
            logger.error(f"Database error counting tasks for user {user_id}: {str(e)}")
            raise RepositoryError(
                message="Failed to count completed tasks",
                operation="count_completed_by_type",
                entity="task",
                details={"error": str(e)}
            ) from e

    async def _list(self, stmt, operation: str) -> List[Task]:
        try:
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error during {operation}: {str(e)}")
            raise RepositoryError(
                message="Failed to list tasks",
                operation=operation,
                entity="task",
                details={"error": str(e)}
            ) from e

    def _domain_to_model(self, task: Task) -> TaskModel:
        return TaskModel(
            id=task.id,
            plant_id=task.plant_id,
            user_id=task.user_id,
            created_at=task.created_at,
            **{column: getattr(task, column) for column in MUTABLE_TASK_FIELDS}
        )

    def _model_to_domain(self, task_model: TaskModel) -> Task:
        return Task(
            id=task_model.id,
            plant_id=task_model.plant_id,
            user_id=task_model.user_id,
            title=task_model.title,
            description=task_model.description,
            type=task_model.type,
            priority=task_model.priority,
            completed=task_model.completed,
            due_date=ensure_utc(task_model.due_date),
            created_at=ensure_utc(task_model.created_at),
        )
