# 📄 File: app/modules/user_management/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the "look something up" requests for users
# 🧪 Purpose (Technical Summary):
# Query definitions for user management reads
# 🔗 Dependencies:
# app.shared.core.commands
# 🔄 Connected Modules / Calls From:
# Query handlers, API clients

from .user_queries import GetUserQuery

__all__ = ["GetUserQuery"]
