from .notification_queries import ListNotificationsQuery

__all__ = ["ListNotificationsQuery"]
