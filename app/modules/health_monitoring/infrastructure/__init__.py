"""Analysis persistence (SQLAlchemy)."""
