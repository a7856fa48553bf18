# 📄 File: app/modules/user_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the requests you can make about users and the code that carries them out
# 🧪 Purpose (Technical Summary):
# Application layer (CQRS) for user management: commands, queries and handlers
# 🔗 Dependencies:
# Domain layer, app.shared.core.dependencies
# 🔄 Connected Modules / Calls From:
# app.bootstrap, API clients

"""
User Management Application Layer

Commands:
- RegisterUserCommand
- GrantPointsCommand

Queries:
- GetUserQuery
"""
