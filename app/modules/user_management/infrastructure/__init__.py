# 📄 File: app/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the code that actually stores users in the database
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for user management (SQLAlchemy persistence)
# 🔗 Dependencies:
# SQLAlchemy, app.shared.infrastructure.database
# 🔄 Connected Modules / Calls From:
# app.shared.infrastructure.database.unit_of_work, migrations
