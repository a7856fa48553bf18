# 📄 File: app/modules/health_monitoring/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes plant check-ups: each analysis records how a plant is doing and what to do about it
# 🧪 Purpose (Technical Summary):
# Package initialization for the health monitoring module. Recording an analysis refreshes the
# plant's health snapshot, creates tasks, sends issue notifications and grants points atomically.
# 🔗 Dependencies:
# SQLAlchemy, pydantic, app.shared.core
# 🔄 Connected Modules / Calls From:
# app.bootstrap, API clients

"""
Health Monitoring Module

Analyses are append-only; the newest one per plant is the "latest analysis".
Metric values are caller-supplied; no image inspection happens here.
"""

__version__ = "1.0.0"
__module_name__ = "health_monitoring"
__description__ = "Plant analyses and their consequences"
