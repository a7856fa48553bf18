# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our database, making sure we can talk to our data storage
# and handing out fresh "conversations" (sessions) to the parts of the app that need them.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine management with connection pooling, health checks with retry,
# schema creation from ORM metadata and a shared async_sessionmaker.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine and sessions)
# - app/shared/config (settings and engine options)
# - asyncpg (PostgreSQL) / aiosqlite (SQLite) async drivers
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session management)
# - app/shared/infrastructure/database/unit_of_work.py
# - app/bootstrap.py (startup/shutdown)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.shared.config.database import DatabaseBase, build_engine_kwargs
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Manages database connections with connection pooling,
    health monitoring, and automatic retry logic.
    """

    def __init__(self, settings: Optional[Settings] = None, database_url: Optional[str] = None):
        self.settings = settings or get_settings()
        self.database_url = database_url or self.settings.database_url
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    async def initialize(self) -> None:
        """Initialize database engine and session factory."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        try:
            logger.info("Initializing database connection pool...")
            self._engine = create_async_engine(**build_engine_kwargs(self.settings, self.database_url))
            self._register_connection_events()
            self._session_maker = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=True,
            )

            status = await self.health_check()
            if status["status"] != "healthy":
                raise DatabaseError(
                    message="Database health check failed during initialization",
                    operation="initialize"
                )

            logger.info(f"Database connection initialized ({self._engine.dialect.name})")

        except SQLAlchemyError as e:
            logger.error(f"Failed to initialize database connection: {e}")
            await self._dispose()
            raise DatabaseError(
                message="Failed to initialize database connection",
                operation="initialize",
                details={"error": str(e)}
            )
        except DatabaseError:
            await self._dispose()
            raise

    def _register_connection_events(self) -> None:
        """Register SQLAlchemy connection event listeners."""
        if self._engine is None or self._engine.dialect.name != "sqlite":
            return

        @event.listens_for(self._engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            """SQLite only enforces ON DELETE CASCADE with foreign keys switched on."""
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    async def create_tables(self) -> None:
        """Create every table registered on the declarative metadata."""
        engine = self._require_engine()
        async with engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.create_all)
        logger.info("Database tables created from ORM metadata")

    async def drop_tables(self) -> None:
        engine = self._require_engine()
        async with engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.drop_all)
        logger.info("Database tables dropped")

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            logger.error("Database engine not initialized")
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except SQLAlchemyError as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._dispose()
        logger.info("Database connection pool closed successfully")

    async def _dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None

    def _require_engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseError(
                message="Database not initialized. Call initialize() first.",
                operation="get_engine"
            )
        return self._engine

    @property
    def engine(self) -> AsyncEngine:
        """Get the SQLAlchemy async engine."""
        return self._require_engine()

    @property
    def session_maker(self) -> async_sessionmaker:
        """Get the session factory bound to the engine."""
        self._require_engine()
        return self._session_maker

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager: Optional[DatabaseConnectionManager] = None


def get_db_manager() -> DatabaseConnectionManager:
    """
    Get the global database connection manager.

    Raises:
        DatabaseError: If database is not initialized
    """
    if db_manager is None or not db_manager.is_initialized:
        raise DatabaseError(
            message="Database not initialized. Call init_database() first.",
            operation="get_db_manager"
        )
    return db_manager


async def init_database(
    settings: Optional[Settings] = None,
    database_url: Optional[str] = None
) -> DatabaseConnectionManager:
    """
    Initialize the global database connection manager.

    Returns:
        DatabaseConnectionManager: The initialized manager
    """
    global db_manager
    if db_manager is not None and db_manager.is_initialized:
        logger.warning("Database already initialized, skipping...")
        return db_manager

    logger.info("Starting database initialization...")
    manager = DatabaseConnectionManager(settings=settings, database_url=database_url)
    await manager.initialize()
    db_manager = manager
    logger.info("Database initialization completed successfully.")
    return manager


async def close_database() -> None:
    """Close the global database connection manager."""
    global db_manager
    if db_manager is None:
        logger.warning("Database not initialized, nothing to close")
        return
    await db_manager.close()
    db_manager = None
