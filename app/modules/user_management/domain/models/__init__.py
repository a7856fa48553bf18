# 📄 File: app/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the user data model - what we store about a gardener
# 🧪 Purpose (Technical Summary):
# Package initialization for domain models: the User entity and level arithmetic
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, application layer, infrastructure layer

from .user import DEFAULT_POINTS_PER_LEVEL, User, level_for_points

__all__ = [
    "User",
    "level_for_points",
    "DEFAULT_POINTS_PER_LEVEL",
]
