from .badge_repository import BadgeRepository

__all__ = ["BadgeRepository"]
