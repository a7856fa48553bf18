"""Task persistence (SQLAlchemy)."""
