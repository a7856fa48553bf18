"""
Infrastructure layer package for Plant Care Application.
Provides the database engine, sessions and the unit of work.
"""

__all__ = []
