"""Badge persistence (SQLAlchemy) and the badge catalog seed."""
