# 📄 File: app/modules/care_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the business logic for care tasks and for turning advice into tasks
# 🧪 Purpose (Technical Summary):
# Package initialization for care domain services
# 🔗 Dependencies:
# Domain models, repositories, PointsService, BadgeService
# 🔄 Connected Modules / Calls From:
# app.shared.core.dependencies, AnalysisService

"""
Care Management Domain Services

- TaskService: task CRUD and the completion transition
- TaskGenerationService: recommendation to task mapping and completion rewards
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .task_generation_service import TaskGenerationService
    from .task_service import TaskService

__all__ = [
    "TaskService",
    "TaskGenerationService",
]
