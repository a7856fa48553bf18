# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) ensuring each piece of work
# gets its own clean session and that half-finished changes are undone when something fails.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session management: commit on success, rollback on error, and
# translation of driver errors into the application's persistence exceptions.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (session factory)
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/unit_of_work.py
# - app/bootstrap.py (catalog and demo seeding)
# - Read-only query handlers

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.shared.core.exceptions import DatabaseError, PlantCareException, TransactionError
from app.shared.infrastructure.database.connection import get_db_manager

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self, session_factory: Optional[async_sessionmaker] = None):
        self._session_factory = session_factory

    @property
    def session_factory(self) -> async_sessionmaker:
        if self._session_factory is None:
            self._session_factory = get_db_manager().session_maker
        return self._session_factory

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Yields:
            AsyncSession: Database session

        Raises:
            DatabaseError: If a database operation fails
            TransactionError: If the work inside the session fails unexpectedly
        """
        session: AsyncSession = self.session_factory()

        try:
            logger.debug("Database session created")
            yield session

            await session.commit()
            logger.debug("Database transaction committed successfully")

        except PlantCareException:
            await session.rollback()
            logger.debug("Application error raised, transaction rolled back")
            raise

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(
                message="Database operation failed",
                details={"error": str(e)}
            ) from e

        except Exception as e:
            await session.rollback()
            logger.error(f"Unexpected error occurred, transaction rolled back: {e}")
            raise TransactionError(
                message="Transaction failed",
                details={"error": str(e)}
            ) from e

        finally:
            await session.close()
            logger.debug("Database session closed")

    @asynccontextmanager
    async def get_read_only_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get a read-only database session (no automatic commit).

        Yields:
            AsyncSession: Read-only database session
        """
        session: AsyncSession = self.session_factory()

        try:
            logger.debug("Read-only database session created")
            yield session

        except exc.SQLAlchemyError as e:
            logger.error(f"Read-only session error: {e}")
            raise DatabaseError(
                message="Read operation failed",
                details={"error": str(e)}
            ) from e

        finally:
            await session.close()
            logger.debug("Read-only database session closed")
