# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains our Plant Care engine code
# and sets up the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info for the plant-care
# gamification and derived-state engine.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - bootstrap.py (application startup)
# - Package imports throughout the application

"""
Plant Care Engine - Gamification and Derived-State Rules

Turns plant analyses into health snapshots, care tasks and notifications,
and awards points, levels and badges for caring for plants.
"""

__version__ = "1.0.0"
__title__ = "Plant Care Engine"
__description__ = "Gamification and derived-state engine for plant care tracking"
__author__ = "Plant Care Team"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
]
