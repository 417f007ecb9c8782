"""Permission created event."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .....core.events import DomainEvent
from ..value_objects import (
    Action,
    PermissionCondition,
    PermissionScope,
    PermissionSettings,
    PermissionStatus,
    PermissionType,
    Resource,
)


@dataclass(frozen=True, kw_only=True)
class PermissionCreatedEvent(DomainEvent):
    """Emitted when a new permission is defined.
    
    Carries the complete definition so consumers can build their own
    read models without loading the aggregate.
    """
    
    resource: Resource
    action: Action
    conditions: Tuple[PermissionCondition, ...]
    scope: PermissionScope
    permission_type: PermissionType
    settings: PermissionSettings
    tenant_id: str
    status: PermissionStatus
    created_by: str
    
    def payload(self) -> Dict[str, Any]:
        return {
            "permissionId": self.aggregate_id,
            "resource": self.resource.to_json(),
            "action": self.action.to_json(),
            "conditions": [condition.to_json() for condition in self.conditions],
            "scope": self.scope.to_json(),
            "type": self.permission_type.value,
            "settings": self.settings.to_json(),
            "tenantId": self.tenant_id,
            "status": self.status.value,
            "createdBy": self.created_by,
        }
