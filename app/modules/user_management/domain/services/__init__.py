# 📄 File: app/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the business logic for signing users up and handing out points
# 🧪 Purpose (Technical Summary):
# Package initialization for user domain services
# 🔗 Dependencies:
# Domain models, repositories, events
# 🔄 Connected Modules / Calls From:
# app.shared.core.dependencies (service wiring), other modules' domain services

"""
User Management Domain Services

- UserService: registration with duplicate-username protection
- PointsService: the single entry point for changing a user's score
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .points_service import PointsService
    from .user_service import UserService

__all__ = [
    "UserService",
    "PointsService",
]
