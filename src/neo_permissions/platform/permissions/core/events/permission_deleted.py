"""Permission deleted event."""

from dataclasses import dataclass
from typing import Any, Dict

from .....core.events import DomainEvent
from ..value_objects import PermissionStatus


@dataclass(frozen=True, kw_only=True)
class PermissionDeletedEvent(DomainEvent):
    """Emitted when a permission is soft-deleted."""
    
    previous_status: PermissionStatus
    deleted_by: str
    
    def payload(self) -> Dict[str, Any]:
        return {
            "permissionId": self.aggregate_id,
            "previousStatus": self.previous_status.value,
            "deletedBy": self.deleted_by,
        }
