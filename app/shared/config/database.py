# 📄 File: app/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for how our Plant Care tables are described to the database,
# so every table and constraint gets a predictable name.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy declarative base with a constraint naming convention and
# engine keyword arguments that depend on the configured database backend.
#
# 🔗 Dependencies:
# - SQLAlchemy declarative base and pooling
# - app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.connection
# - All module ORM models (infrastructure/database/models.py)
# - migrations/env.py

from typing import Any, Dict

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from .settings import Settings


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

def build_engine_kwargs(settings: Settings, url: str) -> Dict[str, Any]:
    """
    Get SQLAlchemy engine configuration for the given backend.

    PostgreSQL gets a bounded connection pool; SQLite (used by the test
    suite and local demos) shares a single connection so that an
    in-memory database survives across sessions.
    """
    if url.startswith("sqlite"):
        return {
            "url": url,
            "echo": settings.debug,
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }

    return {
        "url": url,
        "echo": settings.debug,
        "echo_pool": settings.debug,
        "pool_pre_ping": True,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "connect_args": {
            "server_settings": {
                "application_name": f"{settings.APP_NAME}_{settings.ENVIRONMENT}",
                "jit": "off",
            },
            "command_timeout": 60,
        },
    }


# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides common metadata configuration for all database
    models in the Plant Care application.
    """
    metadata = metadata
