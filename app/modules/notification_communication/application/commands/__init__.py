from .notification_commands import MarkNotificationReadCommand

__all__ = ["MarkNotificationReadCommand"]
