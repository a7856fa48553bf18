# 📄 File: app/modules/notification_communication/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the messages the app leaves for gardeners: problems spotted, badges earned and tips
# 🧪 Purpose (Technical Summary):
# Package initialization for the notification module (in-app inbox with read receipts)
# 🔗 Dependencies:
# SQLAlchemy, pydantic, app.shared.core
# 🔄 Connected Modules / Calls From:
# health_monitoring (issue notifications), gamification (badge notifications), app.bootstrap

"""
Notification Communication Module

Notifications start unread; marking one read is the only change allowed.
Delivery outside the app (push, email) is not part of this module.
"""

__version__ = "1.0.0"
__module_name__ = "notification_communication"
__description__ = "In-app notifications"
