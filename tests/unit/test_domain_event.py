"""Tests for the DomainEvent base class."""

from dataclasses import FrozenInstanceError, dataclass
from datetime import datetime, timezone
from typing import Any, Dict

import pytest

from neo_permissions.core.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class SampleEvent(DomainEvent):
    note: str = ""
    
    def payload(self) -> Dict[str, Any]:
        return {"note": self.note}


class TestDomainEvent:
    """Base event metadata and serialization."""
    
    def test_metadata_defaults(self):
        event = SampleEvent(aggregate_id="agg-1")
        
        assert event.event_type == "SampleEvent"
        assert event.event_version == 1
        assert event.event_id
        assert event.occurred_on.tzinfo is not None
    
    def test_to_json_merges_payload(self):
        event = SampleEvent(
            aggregate_id="agg-1",
            note="hello",
            occurred_on=datetime(2030, 1, 1, tzinfo=timezone.utc),
        )
        data = event.to_json()
        
        assert data["eventType"] == "SampleEvent"
        assert data["aggregateId"] == "agg-1"
        assert data["occurredOn"] == "2030-01-01T00:00:00Z"
        assert data["note"] == "hello"
    
    def test_events_are_immutable(self):
        event = SampleEvent(aggregate_id="agg-1")
        with pytest.raises(FrozenInstanceError):
            event.note = "changed"
    
    def test_validation(self):
        with pytest.raises(ValueError, match="Aggregate ID cannot be empty"):
            SampleEvent(aggregate_id="")
        with pytest.raises(ValueError, match="Event version must be >= 1"):
            SampleEvent(aggregate_id="agg-1", event_version=0)
    
    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            DomainEvent(aggregate_id="agg-1")
