# 📄 File: app/modules/gamification/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes badges: the little trophies gardeners earn for milestones like their first plant
# 🧪 Purpose (Technical Summary):
# Package initialization for the gamification module: the badge catalog, typed badge
# requirements and the idempotent award operation
# 🔗 Dependencies:
# SQLAlchemy, pydantic, app.shared.core
# 🔄 Connected Modules / Calls From:
# plant_management (First Plant), care_management (Hydration Pro), app.bootstrap (catalog seed)

"""
Gamification Module

- A badge is held at most once per user
- Earning a badge grants its bonus points and sends a badge notification
"""

__version__ = "1.0.0"
__module_name__ = "gamification"
__description__ = "Badges and badge awards"
