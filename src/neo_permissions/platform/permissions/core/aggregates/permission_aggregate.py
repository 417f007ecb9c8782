"""Permission aggregate.

Command facade over a single permission entity. Every command validates
first and mutates second, so a rejected command leaves the entity and the
event buffer exactly as they were. Successful commands append one domain
event and bump the aggregate version.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from .....config import get_settings
from .....core.entities import AuditInfo
from .....core.events import DomainEvent
from .....core.exceptions import PermissionDomainError
from .....core.value_objects import TenantId
from ..entities import AggregateSnapshot, PermissionEntity
from ..events import (
    PermissionCreatedEvent,
    PermissionDeletedEvent,
    PermissionRestoredEvent,
    PermissionStatusChangedEvent,
    PermissionUpdatedEvent,
)
from ..exceptions import (
    InvalidPermissionError,
    InvalidSnapshotError,
    PermissionNotFoundError,
)
from ..value_objects import (
    Action,
    PermissionCondition,
    PermissionId,
    PermissionScope,
    PermissionSettings,
    PermissionStatus,
    PermissionType,
    Resource,
)

logger = logging.getLogger(__name__)


class PermissionAggregate:
    """Event-recording facade over one PermissionEntity."""
    
    def __init__(self, permission: Optional[PermissionEntity] = None, version: int = 0):
        self._permission = permission
        self._version = version
        self._uncommitted_events: List[DomainEvent] = []
    
    @property
    def permission(self) -> Optional[PermissionEntity]:
        return self._permission
    
    @property
    def version(self) -> int:
        """Number of events this aggregate has produced over its lifetime."""
        return self._version
    
    @property
    def uncommitted_events(self) -> List[DomainEvent]:
        return list(self._uncommitted_events)
    
    def has_uncommitted_events(self) -> bool:
        return bool(self._uncommitted_events)
    
    def mark_events_as_committed(self) -> None:
        """Clear the event buffer once the events have been published."""
        logger.debug(f"Committed {len(self._uncommitted_events)} permission events")
        self._uncommitted_events.clear()
    
    def _record(self, event: DomainEvent) -> None:
        self._uncommitted_events.append(event)
        self._version += 1
        logger.debug(f"Recorded {event.event_type} for permission {event.aggregate_id}")
    
    def _require_permission(self) -> PermissionEntity:
        if self._permission is None:
            raise PermissionNotFoundError()
        return self._permission
    
    @staticmethod
    def _actor(actor: Optional[str]) -> str:
        return actor or get_settings().default_actor
    
    # Commands
    
    def create_permission(
        self,
        resource: Resource,
        action: Action,
        conditions: Iterable[PermissionCondition],
        scope: PermissionScope,
        permission_type: PermissionType,
        settings: PermissionSettings,
        tenant_id: TenantId,
        created_by: Optional[str] = None,
        permission_id: Optional[PermissionId] = None,
    ) -> PermissionEntity:
        """Create the permission held by this aggregate.
        
        The permission starts ACTIVE, or PENDING_APPROVAL when its settings
        require approval.
        
        Raises:
            InvalidPermissionError: If the aggregate already holds a
                permission or the definition is invalid
        """
        if self._permission is not None:
            raise InvalidPermissionError(
                "Aggregate already holds a permission",
                permission_id=str(self._permission.id),
            )
        
        actor = self._actor(created_by)
        status = (
            PermissionStatus.PENDING_APPROVAL
            if isinstance(settings, PermissionSettings) and settings.requires_approval
            else PermissionStatus.ACTIVE
        )
        
        try:
            permission = PermissionEntity(
                id=permission_id or PermissionId.generate(),
                resource=resource,
                action=action,
                conditions=conditions,
                scope=scope,
                type=permission_type,
                tenant_id=tenant_id,
                settings=settings,
                status=status,
                audit=AuditInfo.create(actor),
            )
        except PermissionDomainError as e:
            logger.warning(f"Permission creation rejected: {e.message}")
            raise
        
        self._permission = permission
        self._record(PermissionCreatedEvent(
            aggregate_id=str(permission.id),
            resource=permission.resource,
            action=permission.action,
            conditions=tuple(permission.conditions),
            scope=permission.scope,
            permission_type=permission.type,
            settings=permission.settings,
            tenant_id=str(permission.tenant_id),
            status=permission.status,
            created_by=actor,
        ))
        
        logger.info(
            f"Created permission {permission.id} ({permission.permission_string()}) "
            f"with status {permission.status.value}"
        )
        return permission
    
    def update_permission(
        self,
        resource: Resource,
        action: Action,
        conditions: Iterable[PermissionCondition],
        scope: PermissionScope,
        settings: PermissionSettings,
        updated_by: Optional[str] = None,
    ) -> None:
        """Replace the permission definition and record old and new values."""
        permission = self._require_permission()
        actor = self._actor(updated_by)
        
        old_resource = permission.resource
        old_action = permission.action
        old_conditions = tuple(permission.conditions)
        old_scope = permission.scope
        old_settings = permission.settings
        
        try:
            permission.update_permission(resource, action, conditions, scope, settings)
        except PermissionDomainError as e:
            logger.warning(f"Update of permission {permission.id} rejected: {e.message}")
            raise
        
        permission.touch(actor)
        self._record(PermissionUpdatedEvent(
            aggregate_id=str(permission.id),
            old_resource=old_resource,
            old_action=old_action,
            old_conditions=old_conditions,
            old_scope=old_scope,
            old_settings=old_settings,
            new_resource=permission.resource,
            new_action=permission.action,
            new_conditions=tuple(permission.conditions),
            new_scope=permission.scope,
            new_settings=permission.settings,
            updated_by=actor,
        ))
        logger.info(f"Updated permission {permission.id} by {actor}")
    
    def _change_status(
        self,
        operation: Callable[[], PermissionStatus],
        name: str,
        actor: Optional[str],
        reason: Optional[str] = None,
    ) -> None:
        permission = self._require_permission()
        actor = self._actor(actor)
        
        try:
            old_status = operation()
        except PermissionDomainError as e:
            logger.warning(f"Cannot {name} permission {permission.id}: {e.message}")
            raise
        
        permission.touch(actor)
        self._record(PermissionStatusChangedEvent(
            aggregate_id=str(permission.id),
            old_status=old_status,
            new_status=permission.status,
            changed_by=actor,
            reason=reason,
        ))
        logger.info(
            f"Permission {permission.id} {old_status.value} -> "
            f"{permission.status.value} by {actor}"
        )
    
    def activate_permission(self, activated_by: Optional[str] = None) -> None:
        permission = self._require_permission()
        self._change_status(permission.activate, "activate", activated_by)
    
    def deactivate_permission(
        self, deactivated_by: Optional[str] = None, reason: Optional[str] = None
    ) -> None:
        permission = self._require_permission()
        self._change_status(permission.deactivate, "deactivate", deactivated_by, reason)
    
    def suspend_permission(
        self, suspended_by: Optional[str] = None, reason: Optional[str] = None
    ) -> None:
        permission = self._require_permission()
        self._change_status(permission.suspend, "suspend", suspended_by, reason)
    
    def approve_permission(self, approved_by: Optional[str] = None) -> None:
        permission = self._require_permission()
        self._change_status(permission.approve, "approve", approved_by)
    
    def reject_permission(
        self, rejected_by: Optional[str] = None, reason: Optional[str] = None
    ) -> None:
        permission = self._require_permission()
        self._change_status(permission.reject, "reject", rejected_by, reason)
    
    def resubmit_permission(self, resubmitted_by: Optional[str] = None) -> None:
        permission = self._require_permission()
        self._change_status(permission.resubmit, "resubmit", resubmitted_by)
    
    def expire_permission(self, expired_by: Optional[str] = None) -> None:
        permission = self._require_permission()
        self._change_status(permission.expire, "expire", expired_by)
    
    def delete_permission(self, deleted_by: Optional[str] = None) -> None:
        """Soft-delete the permission.
        
        Raises:
            InvalidStateTransitionError: If the status does not allow deletion
            InvalidPermissionError: If the settings forbid deletion
        """
        permission = self._require_permission()
        actor = self._actor(deleted_by)
        
        try:
            previous_status = permission.soft_delete()
        except PermissionDomainError as e:
            logger.warning(f"Cannot delete permission {permission.id}: {e.message}")
            raise
        
        permission.mark_deleted(actor)
        self._record(PermissionDeletedEvent(
            aggregate_id=str(permission.id),
            previous_status=previous_status,
            deleted_by=actor,
        ))
        logger.info(f"Deleted permission {permission.id} by {actor}")
    
    def restore_permission(self, restored_by: Optional[str] = None) -> None:
        """Bring a suspended or inactive permission back to ACTIVE."""
        permission = self._require_permission()
        actor = self._actor(restored_by)
        
        try:
            previous_status = permission.restore()
        except PermissionDomainError as e:
            logger.warning(f"Cannot restore permission {permission.id}: {e.message}")
            raise
        
        permission.touch(actor)
        self._record(PermissionRestoredEvent(
            aggregate_id=str(permission.id),
            previous_status=previous_status,
            restored_by=actor,
        ))
        logger.info(f"Restored permission {permission.id} by {actor}")
    
    # Snapshots
    
    def to_snapshot(self) -> Dict[str, Any]:
        """Persistable state: the entity snapshot and the version."""
        return {
            "permission": self._permission.to_snapshot() if self._permission else None,
            "version": self._version,
        }
    
    @classmethod
    def from_snapshot(cls, snapshot: Mapping[str, Any]) -> 'PermissionAggregate':
        """Rebuild an aggregate from ``to_snapshot()`` output.
        
        The restored aggregate has no uncommitted events.
        
        Raises:
            InvalidSnapshotError: If the snapshot is malformed
        """
        try:
            data = AggregateSnapshot.model_validate(snapshot)
        except ValidationError as e:
            raise InvalidSnapshotError(
                "Permission aggregate snapshot failed validation",
                errors=e.errors(include_url=False, include_context=False),
            ) from e
        
        permission = None
        if data.permission is not None:
            permission = PermissionEntity.from_snapshot(snapshot["permission"])
        
        logger.debug(f"Restored permission aggregate at version {data.version}")
        return cls(permission=permission, version=data.version)
