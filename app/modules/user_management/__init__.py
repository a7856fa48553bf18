# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about gardeners: signing up, their points and the level those points earn them
# 🧪 Purpose (Technical Summary):
# Package initialization for the user management module (DDD layering with CQRS handlers)
# covering registration, password hashing and the points/level ledger
# 🔗 Dependencies:
# SQLAlchemy, pydantic, passlib, app.shared.core
# 🔄 Connected Modules / Calls From:
# app.bootstrap, every module that grants points or checks that a user exists

"""
User Management Module

- Registration with unique usernames and hashed passwords
- Points ledger: grants never decrease the score
- Level derived from points (floor(points / POINTS_PER_LEVEL) + 1)
"""

__version__ = "1.0.0"
__module_name__ = "user_management"
__description__ = "Users, points and levels"

__all__ = [
    "__version__",
    "__module_name__",
    "__description__",
]
