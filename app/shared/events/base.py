# 📄 File: app/shared/events/base.py

# 🧭 Purpose (Layman Explanation):
# This file defines the basic building blocks for events - the little "something happened"
# messages our app records when points are granted, badges earned or tasks created.

# 🧪 Purpose (Technical Summary):
# Base event classes for domain events plus the Outcome container that domain
# operations return: the operation's value together with the ordered events it raised.

# 🔗 Dependencies:
# - uuid: Event unique identifiers
# - datetime: Event timestamps
# - dataclasses: Event structure definitions
# - typing: Type annotations

# 🔄 Connected Modules / Calls From:
# Used by: All domain modules for concrete event types, the unit of work for
# collecting events, the event publisher for distribution after commit

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Generic, Iterable, List, Optional, TypeVar
from uuid import uuid4

T = TypeVar("T")


@dataclass
class EventMetadata:
    """
    Metadata for domain events.

    Contains common information about event tracking and routing.
    """
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = "1.0"
    source: str = "plant-care-engine"
    correlation_id: Optional[str] = None
    causation_id: Optional[str] = None
    user_id: Optional[int] = None

    # Routing metadata
    category: str = "general"
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to dictionary."""
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EventMetadata':
        """Create metadata from dictionary."""
        data = dict(data)
        if 'timestamp' in data and isinstance(data['timestamp'], str):
            data['timestamp'] = datetime.fromisoformat(data['timestamp'])
        return cls(**data)


class DomainEvent(ABC):
    """
    Base class for all domain events.

    Provides common structure and functionality for events
    throughout the Plant Care Application.
    """

    def __init__(
        self,
        event_type: str,
        data: Dict[str, Any],
        metadata: Optional[EventMetadata] = None,
        **kwargs
    ):
        """
        Initialize domain event.

        Args:
            event_type: Type identifier for the event
            data: Event payload data
            metadata: Event metadata
            **kwargs: Additional metadata fields
        """
        self.event_type = event_type
        self.data = data or {}

        if metadata is None:
            metadata = EventMetadata()

        for key, value in kwargs.items():
            if hasattr(metadata, key):
                setattr(metadata, key, value)

        self.metadata = metadata

        self._validate()

    def _validate(self):
        """Validate event structure and data."""
        if not self.event_type:
            raise ValueError("Event type is required")

        if not isinstance(self.data, dict):
            raise ValueError("Event data must be a dictionary")

        self._validate_event_data()

    @abstractmethod
    def _validate_event_data(self):
        """Validate event-specific data. Override in subclasses."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary representation."""
        return {
            'event_type': self.event_type,
            'data': self.data,
            'metadata': self.metadata.to_dict()
        }

    def to_json(self) -> str:
        """Convert event to JSON string."""
        return json.dumps(self.to_dict(), default=str, ensure_ascii=False)

    def set_correlation_id(self, correlation_id: str):
        """Set correlation ID for event tracking."""
        self.metadata.correlation_id = correlation_id

    def __str__(self) -> str:
        return f"{self.event_type}({self.metadata.event_id})"

    def __repr__(self) -> str:
        return f"DomainEvent(type='{self.event_type}', id='{self.metadata.event_id}')"


class UserEvent(DomainEvent):
    """Base class for user-related events."""

    def __init__(self, event_type: str, user_id: int, data: Dict[str, Any] = None, **kwargs):
        data = data or {}
        data['user_id'] = user_id

        kwargs.setdefault('category', 'user')
        kwargs.setdefault('user_id', user_id)

        super().__init__(event_type, data, **kwargs)

    def _validate_event_data(self):
        """Validate user event data."""
        if 'user_id' not in self.data:
            raise ValueError("User events must contain user_id")

    @property
    def user_id(self) -> int:
        """Get user ID from event data."""
        return self.data['user_id']


class PlantEvent(DomainEvent):
    """Base class for plant-related events."""

    def __init__(
        self,
        event_type: str,
        plant_id: int,
        user_id: int,
        data: Dict[str, Any] = None,
        **kwargs
    ):
        data = data or {}
        data.update({
            'plant_id': plant_id,
            'user_id': user_id
        })

        kwargs.setdefault('category', 'plant')
        kwargs.setdefault('user_id', user_id)

        super().__init__(event_type, data, **kwargs)

    def _validate_event_data(self):
        """Validate plant event data."""
        required_fields = ['plant_id', 'user_id']
        for field_name in required_fields:
            if field_name not in self.data:
                raise ValueError(f"Plant events must contain {field_name}")

    @property
    def plant_id(self) -> int:
        """Get plant ID from event data."""
        return self.data['plant_id']

    @property
    def user_id(self) -> int:
        """Get user ID from event data."""
        return self.data['user_id']


@dataclass
class Outcome(Generic[T]):
    """
    Result of a domain operation.

    Carries the operation's value and every domain event it raised, in the
    order the side effects happened. Nested operations merge their events
    into the caller's outcome with `absorb`.
    """
    value: Optional[T] = None
    events: List[DomainEvent] = field(default_factory=list)

    def add(self, event: DomainEvent) -> 'Outcome[T]':
        self.events.append(event)
        return self

    def absorb(self, other: 'Outcome[Any]') -> Any:
        """Append another outcome's events and hand back its value."""
        self.events.extend(other.events)
        return other.value

    def extend(self, events: Iterable[DomainEvent]) -> 'Outcome[T]':
        self.events.extend(events)
        return self

    @property
    def event_types(self) -> List[str]:
        return [event.event_type for event in self.events]


class EventHandler(ABC):
    """
    Abstract base class for event handlers.

    Event handlers react to published domain events after the
    command that raised them has committed.
    """

    @abstractmethod
    async def handle(self, event: DomainEvent) -> bool:
        """
        Handle a domain event.

        Args:
            event: Domain event to handle

        Returns:
            True if handled successfully, False otherwise
        """
        pass

    @abstractmethod
    def can_handle(self, event_type: str) -> bool:
        """
        Check if handler can process event type.

        Args:
            event_type: Event type to check

        Returns:
            True if handler can process event type
        """
        pass

    def get_handler_name(self) -> str:
        """Get handler name for logging and debugging."""
        return self.__class__.__name__
