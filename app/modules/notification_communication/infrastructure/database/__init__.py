from .models import NotificationModel
from .notification_repository_impl import NotificationRepositoryImpl

__all__ = [
    "NotificationModel",
    "NotificationRepositoryImpl",
]
