# 📄 File: app/shared/events/publisher.py
# 🧭 Purpose (Layman Explanation):
# This file is like a postal service for the app - once a change has been safely saved
# (a badge earned, a task created), it delivers the news to anyone who asked to hear about it.
# 🧪 Purpose (Technical Summary):
# In-process event publisher. Subscribers register for an event type (or "*") and
# receive events after the unit of work commits; a bounded history keeps recently
# published events for inspection and tests.
# 🔗 Dependencies:
# base.py, asyncio, logging, collections
# 🔄 Connected Modules / Calls From:
# Unit of work (publishes after commit), bootstrap (subscribes log handlers), tests

import asyncio
import logging
from collections import defaultdict, deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Deque, Dict, Iterable, List, Optional, Union

from .base import DomainEvent, EventHandler

logger = logging.getLogger(__name__)

EventCallback = Callable[[DomainEvent], Union[None, Awaitable[Any]]]
Subscriber = Union[EventHandler, EventCallback]

ALL_EVENTS = "*"


@dataclass
class PublishedEvent:
    """Published event with delivery tracking"""
    event: DomainEvent
    published_at: datetime
    delivered_to: int = 0
    failed_handlers: int = 0

    @property
    def event_type(self) -> str:
        return self.event.event_type


class EventPublisher:
    """
    Event publisher that delivers committed domain events to subscribers.

    Delivery is immediate and sequential, in publish order. A failing
    subscriber is logged and counted; it never stops delivery to the
    remaining subscribers, since the originating transaction is already
    committed by the time events are published.
    """

    def __init__(self, history_size: int = 1000):
        self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)
        self.history: Deque[PublishedEvent] = deque(maxlen=history_size)

        # Statistics
        self.published_count = 0
        self.failed_count = 0

        logger.info("Event publisher initialized")

    def subscribe(self, event_type: str, subscriber: Subscriber) -> None:
        """
        Register a subscriber for an event type.

        Args:
            event_type: Event type to listen to, or "*" for every event
            subscriber: EventHandler instance or plain (async) callable
        """
        if subscriber not in self._subscribers[event_type]:
            self._subscribers[event_type].append(subscriber)
            logger.debug(f"Subscribed {self._subscriber_name(subscriber)} to {event_type}")

    def unsubscribe(self, event_type: str, subscriber: Subscriber) -> bool:
        if subscriber in self._subscribers.get(event_type, []):
            self._subscribers[event_type].remove(subscriber)
            return True
        return False

    async def publish(self, event: DomainEvent) -> PublishedEvent:
        """
        Publish a domain event to its subscribers.

        Args:
            event: Domain event to publish

        Returns:
            PublishedEvent: Delivery record kept in the history
        """
        published_event = PublishedEvent(
            event=event,
            published_at=datetime.now(timezone.utc)
        )

        for subscriber in self._subscribers_for(event.event_type):
            try:
                if isinstance(subscriber, EventHandler):
                    await subscriber.handle(event)
                else:
                    result = subscriber(event)
                    if asyncio.iscoroutine(result):
                        await result
                published_event.delivered_to += 1
            except Exception as e:
                published_event.failed_handlers += 1
                self.failed_count += 1
                logger.error(
                    f"Subscriber {self._subscriber_name(subscriber)} failed for "
                    f"{event.event_type} ({event.metadata.event_id}): {e}"
                )

        self.history.append(published_event)
        self.published_count += 1
        logger.debug(f"Published event {event.metadata.event_id} ({event.event_type})")

        return published_event

    async def publish_all(self, events: Iterable[DomainEvent]) -> List[PublishedEvent]:
        """Publish events one by one, preserving their order."""
        return [await self.publish(event) for event in events]

    def recent_events(self, event_type: Optional[str] = None) -> List[DomainEvent]:
        """Get published events, oldest first, optionally filtered by type."""
        return [
            item.event for item in self.history
            if event_type is None or item.event_type == event_type
        ]

    def clear_history(self) -> None:
        self.history.clear()

    def get_publisher_metrics(self) -> Dict[str, Any]:
        """Get publisher statistics."""
        return {
            "published_count": self.published_count,
            "failed_count": self.failed_count,
            "subscriptions": {
                event_type: len(subscribers)
                for event_type, subscribers in self._subscribers.items()
            },
            "history_size": len(self.history),
        }

    def _subscribers_for(self, event_type: str) -> List[Subscriber]:
        subscribers = list(self._subscribers.get(event_type, []))
        for subscriber in self._subscribers.get(ALL_EVENTS, []):
            if subscriber not in subscribers:
                if isinstance(subscriber, EventHandler) and not subscriber.can_handle(event_type):
                    continue
                subscribers.append(subscriber)
        return subscribers

    @staticmethod
    def _subscriber_name(subscriber: Subscriber) -> str:
        if isinstance(subscriber, EventHandler):
            return subscriber.get_handler_name()
        return getattr(subscriber, "__qualname__", repr(subscriber))


# Global event publisher instance
event_publisher = EventPublisher()


def get_event_publisher() -> EventPublisher:
    """Get the process-wide event publisher."""
    return event_publisher
