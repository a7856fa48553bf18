# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules for user accounts, like how points turn into levels
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting the user entity, its events and the repository interface
# 🔗 Dependencies:
# Domain models, repositories, events from subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, infrastructure layer, other modules' domain services

"""
User Management Domain Layer

Domain Models:
- User: account with score and derived level

Domain Services (import from .services):
- UserService: registration and lookups
- PointsService: point grants and level-up detection

Domain Events:
- UserRegistered, PointsGranted, UserLeveledUp
"""

from .models.user import User, level_for_points
from .repositories.user_repository import UserRepository
from .events.user_events import PointsGranted, UserLeveledUp, UserRegistered

__all__ = [
    # Domain Models
    "User",
    "level_for_points",

    # Repository Interfaces
    "UserRepository",

    # Domain Events
    "UserRegistered",
    "PointsGranted",
    "UserLeveledUp",
]
