"""
Notification Communication Application Layer

Commands: MarkNotificationReadCommand
Queries: ListNotificationsQuery
"""
