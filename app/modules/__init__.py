"""
Feature modules of the plant care engine.

Each module follows the same layering:
- domain: models, events, repository interfaces and services
- application: commands, queries and their handlers
- infrastructure: SQLAlchemy models and repository implementations
"""
