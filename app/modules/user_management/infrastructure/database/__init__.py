# 📄 File: app/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database table for users and the code that reads and writes it
# 🧪 Purpose (Technical Summary):
# SQLAlchemy model and UserRepository implementation
# 🔗 Dependencies:
# SQLAlchemy, app.shared.config.database
# 🔄 Connected Modules / Calls From:
# Unit of work, alembic env

from .models import UserModel
from .user_repository_impl import UserRepositoryImpl

__all__ = [
    "UserModel",
    "UserRepositoryImpl",
]
