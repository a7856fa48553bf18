# 📄 File: app/modules/gamification/domain/events/badge_events.py
# 🧭 Purpose (Layman Explanation):
# The "you earned a badge" event other parts of the app can listen for
# 🧪 Purpose (Technical Summary):
# Gamification domain events
# 🔗 Dependencies:
# app.shared.events.base
# 🔄 Connected Modules / Calls From:
# badge_service.py, event subscribers

from app.shared.events.base import UserEvent


class BadgeEarned(UserEvent):
    """
    Event fired when a user earns a badge for the first time.
    """

    EVENT_TYPE = "gamification.badge_earned"

    def __init__(self, user_id: int, badge_id: int, badge_name: str, points_bonus: int, **kwargs):
        data = {
            "badge_id": badge_id,
            "badge_name": badge_name,
            "points_bonus": points_bonus,
        }
        kwargs.setdefault("category", "gamification")
        super().__init__(self.EVENT_TYPE, user_id, data, **kwargs)

    def _validate_event_data(self):
        super()._validate_event_data()
        if not self.data.get("badge_name"):
            raise ValueError("Badge events must contain badge_name")

    @property
    def badge_name(self) -> str:
        return self.data["badge_name"]
