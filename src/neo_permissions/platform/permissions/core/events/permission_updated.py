"""Permission updated event."""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .....core.events import DomainEvent
from ..value_objects import (
    Action,
    PermissionCondition,
    PermissionScope,
    PermissionSettings,
    Resource,
)


@dataclass(frozen=True, kw_only=True)
class PermissionUpdatedEvent(DomainEvent):
    """Emitted when a permission definition is replaced.
    
    Both the previous and the new definition are recorded.
    """
    
    old_resource: Resource
    old_action: Action
    old_conditions: Tuple[PermissionCondition, ...]
    old_scope: PermissionScope
    old_settings: PermissionSettings
    new_resource: Resource
    new_action: Action
    new_conditions: Tuple[PermissionCondition, ...]
    new_scope: PermissionScope
    new_settings: PermissionSettings
    updated_by: str
    
    def changed_fields(self) -> List[str]:
        """Names of the parts that differ between old and new."""
        pairs = {
            "resource": (self.old_resource, self.new_resource),
            "action": (self.old_action, self.new_action),
            "conditions": (self.old_conditions, self.new_conditions),
            "scope": (self.old_scope, self.new_scope),
            "settings": (self.old_settings, self.new_settings),
        }
        return [name for name, (old, new) in pairs.items() if old != new]
    
    def payload(self) -> Dict[str, Any]:
        return {
            "permissionId": self.aggregate_id,
            "oldResource": self.old_resource.to_json(),
            "oldAction": self.old_action.to_json(),
            "oldConditions": [c.to_json() for c in self.old_conditions],
            "oldScope": self.old_scope.to_json(),
            "oldSettings": self.old_settings.to_json(),
            "newResource": self.new_resource.to_json(),
            "newAction": self.new_action.to_json(),
            "newConditions": [c.to_json() for c in self.new_conditions],
            "newScope": self.new_scope.to_json(),
            "newSettings": self.new_settings.to_json(),
            "changedFields": self.changed_fields(),
            "updatedBy": self.updated_by,
        }
