# 📄 File: app/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Describes how user data is saved and loaded, without saying which database does it
# 🧪 Purpose (Technical Summary):
# Repository interface package for the User aggregate
# 🔗 Dependencies:
# Domain models
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure repository implementations

from .user_repository import UserRepository

__all__ = ["UserRepository"]
