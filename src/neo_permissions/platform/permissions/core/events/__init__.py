"""Permission domain events."""

from .permission_created import PermissionCreatedEvent
from .permission_updated import PermissionUpdatedEvent
from .permission_status_changed import PermissionStatusChangedEvent
from .permission_deleted import PermissionDeletedEvent
from .permission_restored import PermissionRestoredEvent

__all__ = [
    "PermissionCreatedEvent",
    "PermissionUpdatedEvent",
    "PermissionStatusChangedEvent",
    "PermissionDeletedEvent",
    "PermissionRestoredEvent",
]
