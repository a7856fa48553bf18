# 📄 File: app/modules/plant_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the plant collection: adding plants, renaming them and keeping their health numbers
# 🧪 Purpose (Technical Summary):
# Package initialization for the plant management module (plant aggregate with health snapshot)
# 🔗 Dependencies:
# SQLAlchemy, pydantic, app.shared.core
# 🔄 Connected Modules / Calls From:
# care_management, health_monitoring, gamification, app.bootstrap

"""
Plant Management Module

- Plants owned by exactly one user
- Five health metrics, each kept within 0..100
- Deleting a plant removes its tasks
"""

__version__ = "1.0.0"
__module_name__ = "plant_management"
__description__ = "Plants and their health snapshot"
