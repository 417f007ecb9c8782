"""Permission status changed event."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .....core.events import DomainEvent
from ..value_objects import PermissionStatus


@dataclass(frozen=True, kw_only=True)
class PermissionStatusChangedEvent(DomainEvent):
    """Emitted for every lifecycle transition except delete and restore."""
    
    old_status: PermissionStatus
    new_status: PermissionStatus
    changed_by: str
    reason: Optional[str] = None
    
    def payload(self) -> Dict[str, Any]:
        return {
            "permissionId": self.aggregate_id,
            "oldStatus": self.old_status.value,
            "newStatus": self.new_status.value,
            "changedBy": self.changed_by,
            "reason": self.reason,
        }
