"""
Database infrastructure: engine management, sessions and the unit of work.

Import the unit of work from its module directly; it depends on every
module's repository implementations.
"""

from .connection import DatabaseConnectionManager, close_database, get_db_manager, init_database
from .session import DatabaseSessionManager

__all__ = [
    "DatabaseConnectionManager",
    "DatabaseSessionManager",
    "close_database",
    "get_db_manager",
    "init_database",
]
