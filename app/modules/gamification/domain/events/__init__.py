from .badge_events import BadgeEarned

__all__ = ["BadgeEarned"]
