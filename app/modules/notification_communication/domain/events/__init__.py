from .notification_events import NotificationCreated, NotificationRead

__all__ = [
    "NotificationCreated",
    "NotificationRead",
]
