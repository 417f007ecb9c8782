"""Domain event base for neo-permissions.

Events are immutable records of something that happened to an aggregate.
They serialize to flat dictionaries of primitives and ISO-8601 strings for
the event bus.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from ...utils import generate_uuid_v7, utc_now, to_utc_string


@dataclass(frozen=True, kw_only=True)
class DomainEvent(ABC):
    """Base class for all domain events emitted by aggregates."""
    
    aggregate_id: str
    event_version: int = 1
    event_id: str = field(default_factory=generate_uuid_v7)
    occurred_on: datetime = field(default_factory=utc_now)
    
    def __post_init__(self) -> None:
        """Validate base event data."""
        if not self.aggregate_id or not str(self.aggregate_id).strip():
            raise ValueError("Aggregate ID cannot be empty")
        if self.event_version < 1:
            raise ValueError("Event version must be >= 1")
    
    @property
    def event_type(self) -> str:
        """Get event type identifier."""
        return self.__class__.__name__
    
    def base_event_data(self) -> Dict[str, Any]:
        """Fields shared by every serialized event."""
        return {
            "eventId": self.event_id,
            "eventType": self.event_type,
            "aggregateId": self.aggregate_id,
            "eventVersion": self.event_version,
            "occurredOn": to_utc_string(self.occurred_on),
        }
    
    @abstractmethod
    def payload(self) -> Dict[str, Any]:
        """Event-specific serialized fields."""
    
    def to_json(self) -> Dict[str, Any]:
        """Convert event to a flat, JSON-serializable dictionary."""
        return {**self.base_event_data(), **self.payload()}
