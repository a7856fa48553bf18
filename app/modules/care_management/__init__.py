# 📄 File: app/modules/care_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes care tasks: the to-do list of watering, feeding and cleaning for each plant
# 🧪 Purpose (Technical Summary):
# Package initialization for the care management module: task CRUD, completion rewards and
# task generation from analysis recommendations
# 🔗 Dependencies:
# SQLAlchemy, pydantic, app.shared.core
# 🔄 Connected Modules / Calls From:
# health_monitoring (recommendation tasks), gamification (Hydration Pro), app.bootstrap

"""
Care Management Module

- Tasks belong to a plant and its owner
- Completion happens once: it grants points and may unlock Hydration Pro
- Urgent and recommended analysis advice becomes dated tasks
"""

__version__ = "1.0.0"
__module_name__ = "care_management"
__description__ = "Care tasks and task generation"
