"""Plant persistence (SQLAlchemy)."""
