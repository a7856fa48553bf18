"""
Gamification Application Layer

Commands: AwardBadgeCommand
Queries: ListBadgesQuery, ListUserBadgesQuery
"""
