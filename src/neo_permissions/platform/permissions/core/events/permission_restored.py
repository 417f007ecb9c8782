"""Permission restored event."""

from dataclasses import dataclass
from typing import Any, Dict

from .....core.events import DomainEvent
from ..value_objects import PermissionStatus


@dataclass(frozen=True, kw_only=True)
class PermissionRestoredEvent(DomainEvent):
    """Emitted when a suspended or inactive permission is made active again."""
    
    previous_status: PermissionStatus
    restored_by: str
    
    def payload(self) -> Dict[str, Any]:
        return {
            "permissionId": self.aggregate_id,
            "previousStatus": self.previous_status.value,
            "restoredBy": self.restored_by,
        }
