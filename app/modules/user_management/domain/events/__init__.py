# 📄 File: app/modules/user_management/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the announcements made when someone signs up, earns points or levels up
# 🧪 Purpose (Technical Summary):
# Package initialization for user domain events published after commit
# 🔗 Dependencies:
# app.shared.events
# 🔄 Connected Modules / Calls From:
# Domain services, unit of work, event subscribers

"""
User Management Domain Events

- UserRegistered: a new account exists
- PointsGranted: score increased by a positive amount
- UserLeveledUp: derived level went up as part of a grant
"""

from .user_events import PointsGranted, UserLeveledUp, UserRegistered

__all__ = [
    "UserRegistered",
    "PointsGranted",
    "UserLeveledUp",
]
