"""Notification persistence (SQLAlchemy)."""
