# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains all the settings and configuration files that tell our Plant Care app
# how to connect to its database and how generous the points system is.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management
# and database model configuration.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (declarative base and engine options)
#
# 🔄 Connected Modules / Calls From:
# - app.bootstrap (application startup)
# - All modules requiring configuration
# - Infrastructure components

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database connection configuration
- Gamification and care scheduling rules
"""

from .settings import get_settings, Settings
from .database import DatabaseBase, build_engine_kwargs

__all__ = [
    "get_settings",
    "Settings",
    "DatabaseBase",
    "build_engine_kwargs",
]
