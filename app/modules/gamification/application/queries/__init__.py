from .badge_queries import ListBadgesQuery, ListUserBadgesQuery

__all__ = [
    "ListBadgesQuery",
    "ListUserBadgesQuery",
]
