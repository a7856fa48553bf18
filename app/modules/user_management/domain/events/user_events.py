# 📄 File: app/modules/user_management/domain/events/user_events.py
# 🧭 Purpose (Layman Explanation):
# Defines the things that can happen to a user account - joining, earning points, reaching a new level -
# so other parts of the app can respond automatically
# 🧪 Purpose (Technical Summary):
# Domain events for the user lifecycle and the points/leveling engine, published after commit
# 🔗 Dependencies:
# app.shared.events.base
# 🔄 Connected Modules / Calls From:
# points_service.py, user command handlers, event subscribers (logging, analytics)

from app.shared.events.base import UserEvent


class UserRegistered(UserEvent):
    """
    Event fired when a new user is registered.

    Triggers:
    - Analytics tracking
    """

    EVENT_TYPE = "user.registered"

    def __init__(self, user_id: int, username: str, **kwargs):
        super().__init__(self.EVENT_TYPE, user_id, {"username": username}, **kwargs)


class PointsGranted(UserEvent):
    """
    Event fired every time points are added to a user, including zero-point grants.
    """

    EVENT_TYPE = "user.points_granted"

    def __init__(self, user_id: int, amount: int, total_points: int, reason: str = "", **kwargs):
        data = {
            "amount": amount,
            "total_points": total_points,
            "reason": reason,
        }
        super().__init__(self.EVENT_TYPE, user_id, data, **kwargs)

    def _validate_event_data(self):
        super()._validate_event_data()
        if self.data["amount"] < 0:
            raise ValueError("Granted points cannot be negative")

    @property
    def amount(self) -> int:
        return self.data["amount"]


class UserLeveledUp(UserEvent):
    """
    Event fired when a points grant raises the user's level.

    No notification is created for level ups; subscribers may react.
    """

    EVENT_TYPE = "user.leveled_up"

    def __init__(self, user_id: int, previous_level: int, new_level: int, **kwargs):
        data = {
            "previous_level": previous_level,
            "new_level": new_level,
        }
        super().__init__(self.EVENT_TYPE, user_id, data, **kwargs)

    @property
    def new_level(self) -> int:
        return self.data["new_level"]
