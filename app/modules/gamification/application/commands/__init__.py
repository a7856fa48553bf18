from .badge_commands import AwardBadgeCommand

__all__ = ["AwardBadgeCommand"]
