# 📄 File: app/shared/events/__init__.py

# 🧭 Purpose (Layman Explanation):
# This package lets different parts of the app hear about what happened elsewhere,
# like a badge being earned or a plant's health being refreshed by an analysis.

# 🧪 Purpose (Technical Summary):
# Domain events system: base event types, the Outcome container returned by domain
# operations, and the in-process publisher that delivers events after commit.

# 🔗 Dependencies:
# - base: Base event classes, metadata and Outcome
# - publisher: Event publishing and subscription

# 🔄 Connected Modules / Calls From:
# Used by: All domain modules, the unit of work, bootstrap and tests

"""
Domain Events System

Event Categories:
- User events (registration, points, level ups)
- Plant events (creation, updates, deletion, health snapshots)
- Care events (task creation and completion)
- Gamification events (badges earned)
- Notification events (notifications created and read)
"""

from .base import (
    DomainEvent,
    EventHandler,
    EventMetadata,
    Outcome,
    PlantEvent,
    UserEvent,
)
from .publisher import (
    ALL_EVENTS,
    EventPublisher,
    PublishedEvent,
    event_publisher,
    get_event_publisher,
)

__all__ = [
    "DomainEvent",
    "EventHandler",
    "EventMetadata",
    "Outcome",
    "PlantEvent",
    "UserEvent",
    "ALL_EVENTS",
    "EventPublisher",
    "PublishedEvent",
    "event_publisher",
    "get_event_publisher",
]
