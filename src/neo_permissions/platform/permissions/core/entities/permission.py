"""Permission domain entity.

A permission binds a resource and an action to a scope, optionally narrowed
by runtime conditions and constrained by its settings. The entity enforces
the cross-field rules between those parts and owns the status state machine.
Status changes never touch the audit trail; the aggregate stamps it through
``touch()`` once a command has succeeded.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from pydantic import ValidationError

from .....config import get_settings
from .....core.entities import AuditInfo
from .....core.exceptions import PermissionDomainError
from .....core.value_objects import TenantId
from .....utils import to_utc_string
from ..exceptions import (
    InvalidPermissionError,
    InvalidSnapshotError,
    InvalidStateTransitionError,
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
    required_scope_level,
    transition,
)
from .snapshot import PermissionSnapshot

logger = logging.getLogger(__name__)

_AUDIT_FIELDS = {
    "created_by",
    "created_at",
    "updated_by",
    "updated_at",
    "version",
    "deleted_at",
    "deleted_by",
}


def _validate_parts(
    resource: Any,
    action: Any,
    scope: Any,
    permission_type: Any,
    settings: Any,
) -> None:
    """Check part types and the type/scope level rule."""
    required = (
        ("resource", resource, Resource),
        ("action", action, Action),
        ("scope", scope, PermissionScope),
        ("type", permission_type, PermissionType),
        ("settings", settings, PermissionSettings),
    )
    for name, value, expected in required:
        if not isinstance(value, expected):
            raise InvalidPermissionError(
                f"Permission {name} is required and must be a {expected.__name__}",
                part=name,
            )
    
    expected_level = required_scope_level(permission_type)
    if scope.level is not expected_level:
        raise InvalidPermissionError(
            f"Permission type {permission_type.value} requires a {expected_level.value} "
            f"scope, got {scope.level.value}",
            type=permission_type.value,
            required_level=expected_level.value,
            actual_level=scope.level.value,
        )


def _validate_conditions(conditions: Iterable[Any]) -> Tuple[PermissionCondition, ...]:
    """Return the conditions as a tuple after checking type, cap and uniqueness."""
    if conditions is None or isinstance(conditions, (str, bytes, Mapping)):
        raise InvalidPermissionError("Permission conditions must be a list")
    
    result = list(conditions)
    max_conditions = get_settings().max_conditions
    if len(result) > max_conditions:
        raise InvalidPermissionError(
            f"A permission cannot have more than {max_conditions} conditions",
            count=len(result),
            max_conditions=max_conditions,
        )
    
    seen = set()
    for condition in result:
        if not isinstance(condition, PermissionCondition):
            raise InvalidPermissionError(
                "Permission conditions must be PermissionCondition instances",
                got=type(condition).__name__,
            )
        if condition in seen:
            raise InvalidPermissionError(
                f"Duplicate permission condition: {condition}",
                condition=condition.to_json(),
            )
        seen.add(condition)
    
    return tuple(result)


@dataclass(eq=False)
class PermissionEntity:
    """Permission entity.
    
    Identity is the permission ID. The definition (resource, action,
    conditions, scope, settings) changes only through ``update_permission``
    and the condition methods; the status changes only through the lifecycle
    methods, each of which is checked against the transition table.
    """
    
    id: PermissionId
    resource: Resource
    action: Action
    scope: PermissionScope
    type: PermissionType
    tenant_id: TenantId
    settings: PermissionSettings = field(default_factory=PermissionSettings.default)
    conditions: Tuple[PermissionCondition, ...] = ()
    status: PermissionStatus = PermissionStatus.ACTIVE
    audit: AuditInfo = field(default_factory=AuditInfo)
    
    def __post_init__(self) -> None:
        """Validate the composed permission."""
        if not isinstance(self.id, PermissionId):
            raise InvalidPermissionError("Permission ID is required", part="id")
        if not isinstance(self.tenant_id, TenantId):
            raise InvalidPermissionError("Tenant ID is required", part="tenant_id")
        if isinstance(self.type, str) and not isinstance(self.type, PermissionType):
            try:
                self.type = PermissionType(self.type)
            except ValueError:
                raise InvalidPermissionError(
                    f"Invalid permission type: {self.type}", part="type"
                ) from None
        
        _validate_parts(self.resource, self.action, self.scope, self.type, self.settings)
        self.conditions = _validate_conditions(self.conditions)
        
        try:
            self.status = PermissionStatus(self.status)
        except ValueError:
            raise InvalidPermissionError(
                f"Invalid permission status: {self.status}", part="status"
            ) from None
        
        if not isinstance(self.audit, AuditInfo):
            raise InvalidPermissionError("Permission audit info is required", part="audit")
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionEntity):
            return NotImplemented
        return self.id == other.id
    
    def __hash__(self) -> int:
        return hash(self.id)
    
    @property
    def entity_id(self) -> str:
        return str(self.id)
    
    # Status queries
    
    def can_be_activated(self) -> bool:
        return self.status.can_transition_to(PermissionStatus.ACTIVE)
    
    def can_be_deactivated(self) -> bool:
        return self.status.can_transition_to(PermissionStatus.INACTIVE)
    
    def can_be_suspended(self) -> bool:
        return self.status.can_transition_to(PermissionStatus.SUSPENDED)
    
    def can_be_restored(self) -> bool:
        return self.status in (PermissionStatus.SUSPENDED, PermissionStatus.INACTIVE)
    
    def can_be_approved(self) -> bool:
        return self.status is PermissionStatus.PENDING_APPROVAL
    
    def can_be_rejected(self) -> bool:
        return self.status is PermissionStatus.PENDING_APPROVAL
    
    def can_be_resubmitted(self) -> bool:
        return self.status is PermissionStatus.REJECTED
    
    def can_be_expired(self) -> bool:
        return self.status.can_transition_to(PermissionStatus.EXPIRED)
    
    def can_be_deleted(self) -> bool:
        """Deletable when the status allows it and the settings permit it."""
        return (
            self.status.can_transition_to(PermissionStatus.DELETED)
            and self.settings.can_be_deleted
        )
    
    def can_be_modified(self) -> bool:
        """Editable in a modifiable status when the settings permit it."""
        return self.status.is_modifiable and self.settings.can_be_modified
    
    def is_active(self) -> bool:
        return self.status is PermissionStatus.ACTIVE
    
    def is_deleted(self) -> bool:
        return self.status is PermissionStatus.DELETED
    
    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Expired by status or because the settings' expiry has passed."""
        return self.status is PermissionStatus.EXPIRED or self.settings.is_expired(now)
    
    def is_effective(self, now: Optional[datetime] = None) -> bool:
        """Active, inside the effective window and not expired."""
        return (
            self.is_active()
            and self.settings.is_effective(now)
            and not self.is_expired(now)
        )
    
    # Lifecycle
    
    def _change_status(self, target: PermissionStatus, operation: str) -> PermissionStatus:
        previous = self.status
        self.status = transition(previous, target, operation)
        logger.debug(f"Permission {self.id} status {previous.value} -> {target.value}")
        return previous
    
    def _refuse(self, target: PermissionStatus, operation: str) -> None:
        raise InvalidStateTransitionError(
            from_status=self.status,
            to_status=target,
            operation=operation,
        )
    
    def activate(self) -> PermissionStatus:
        """Move to ACTIVE. Returns the previous status."""
        return self._change_status(PermissionStatus.ACTIVE, "activate")
    
    def deactivate(self) -> PermissionStatus:
        return self._change_status(PermissionStatus.INACTIVE, "deactivate")
    
    def suspend(self) -> PermissionStatus:
        return self._change_status(PermissionStatus.SUSPENDED, "suspend")
    
    def expire(self) -> PermissionStatus:
        return self._change_status(PermissionStatus.EXPIRED, "expire")
    
    def restore(self) -> PermissionStatus:
        """Bring a suspended or inactive permission back to ACTIVE."""
        if not self.can_be_restored():
            self._refuse(PermissionStatus.ACTIVE, "restore")
        return self._change_status(PermissionStatus.ACTIVE, "restore")
    
    def approve(self) -> PermissionStatus:
        if not self.can_be_approved():
            self._refuse(PermissionStatus.ACTIVE, "approve")
        return self._change_status(PermissionStatus.ACTIVE, "approve")
    
    def reject(self) -> PermissionStatus:
        if not self.can_be_rejected():
            self._refuse(PermissionStatus.REJECTED, "reject")
        return self._change_status(PermissionStatus.REJECTED, "reject")
    
    def resubmit(self) -> PermissionStatus:
        """Send a rejected permission back for approval."""
        if not self.can_be_resubmitted():
            self._refuse(PermissionStatus.PENDING_APPROVAL, "resubmit")
        return self._change_status(PermissionStatus.PENDING_APPROVAL, "resubmit")
    
    def soft_delete(self) -> PermissionStatus:
        """Move to DELETED. Permissions are never removed outright.
        
        Raises:
            InvalidStateTransitionError: If the status does not allow deletion
            InvalidPermissionError: If the settings forbid deletion
        """
        if not self.status.can_transition_to(PermissionStatus.DELETED):
            self._refuse(PermissionStatus.DELETED, "delete")
        if not self.settings.can_be_deleted:
            raise InvalidPermissionError(
                "Permission settings do not allow deletion",
                permission_id=str(self.id),
            )
        return self._change_status(PermissionStatus.DELETED, "delete")
    
    # Audit
    
    def touch(self, actor: str) -> None:
        """Record a change made by ``actor``."""
        self.audit = self.audit.touched(actor)
    
    def mark_deleted(self, actor: str) -> None:
        """Record the soft deletion made by ``actor``."""
        self.audit = self.audit.deleted(actor)
    
    # Definition
    
    def update_permission(
        self,
        resource: Resource,
        action: Action,
        conditions: Iterable[PermissionCondition],
        scope: PermissionScope,
        settings: PermissionSettings,
    ) -> None:
        """Replace the permission definition.
        
        Everything is validated before anything is assigned, so a failed
        update leaves the entity untouched. The type is fixed, so the new
        scope must still sit at the level the type requires.
        
        Raises:
            InvalidPermissionError: If the permission cannot be modified or
                the new definition is invalid
        """
        if not self.can_be_modified():
            raise InvalidPermissionError(
                f"Permission in status {self.status.value} cannot be modified",
                permission_id=str(self.id),
                status=self.status.value,
            )
        
        _validate_parts(resource, action, scope, self.type, settings)
        new_conditions = _validate_conditions(conditions)
        
        self.resource = resource
        self.action = action
        self.conditions = new_conditions
        self.scope = scope
        self.settings = settings
    
    def has_condition(self, condition: PermissionCondition) -> bool:
        return condition in self.conditions
    
    def add_condition(self, condition: PermissionCondition) -> None:
        """Append a condition, keeping the list unique and under the cap."""
        if not isinstance(condition, PermissionCondition):
            raise InvalidPermissionError(
                "Permission conditions must be PermissionCondition instances",
                got=type(condition).__name__,
            )
        if self.has_condition(condition):
            raise InvalidPermissionError(
                f"Permission condition already exists: {condition}",
                condition=condition.to_json(),
            )
        max_conditions = get_settings().max_conditions
        if len(self.conditions) >= max_conditions:
            raise InvalidPermissionError(
                f"A permission cannot have more than {max_conditions} conditions",
                count=len(self.conditions),
                max_conditions=max_conditions,
            )
        self.conditions = self.conditions + (condition,)
    
    def remove_condition(self, condition: PermissionCondition) -> None:
        if not self.has_condition(condition):
            raise InvalidPermissionError(
                f"Permission condition does not exist: {condition}",
                condition=condition.to_json() if isinstance(condition, PermissionCondition) else None,
            )
        self.conditions = tuple(c for c in self.conditions if c != condition)
    
    # Authorization
    
    def matches(self, resource: Resource, action: Action, scope: PermissionScope) -> bool:
        """Check whether this permission covers the requested access."""
        return (
            self.resource == resource
            and self.action == action
            and self.scope.includes(scope)
        )
    
    def evaluate_conditions(self, context: Optional[Mapping[str, Any]] = None) -> bool:
        """All conditions must hold; no conditions means no restriction."""
        context = context or {}
        return all(condition.evaluate(context) for condition in self.conditions)
    
    def is_authorized(
        self,
        resource: Resource,
        action: Action,
        scope: PermissionScope,
        context: Optional[Mapping[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> bool:
        """Decide whether this permission grants the requested access.
        
        Args:
            resource: Resource being accessed
            action: Action being performed
            scope: Scope the request is made in
            context: Attributes of the request for condition evaluation
            now: Evaluation time, defaults to the current UTC time
        
        Returns:
            True if the permission matches, is in effect and every
            condition holds
        """
        return (
            self.matches(resource, action, scope)
            and self.is_effective(now)
            and self.evaluate_conditions(context)
        )
    
    def permission_string(self) -> str:
        """Render as ``resource:action:scope[conditions]``."""
        conditions = ""
        if self.conditions:
            conditions = "[" + ", ".join(str(c) for c in self.conditions) + "]"
        return f"{self.resource}:{self.action}:{self.scope}{conditions}"
    
    def __str__(self) -> str:
        return self.permission_string()
    
    # Serialization
    
    def to_json(self) -> Dict[str, Any]:
        """Convert permission to dictionary for serialization."""
        return {
            "id": str(self.id),
            "resource": self.resource.to_json(),
            "action": self.action.to_json(),
            "conditions": [condition.to_json() for condition in self.conditions],
            "scope": self.scope.to_json(),
            "type": self.type.value,
            "status": self.status.value,
            "settings": self.settings.to_json(),
            "tenantId": str(self.tenant_id),
            "createdAt": to_utc_string(self.audit.created_at),
            "updatedAt": to_utc_string(self.audit.updated_at),
            "deletedAt": to_utc_string(self.audit.deleted_at) if self.audit.deleted_at else None,
        }
    
    def to_snapshot(self) -> Dict[str, Any]:
        """Full state for persistence, audit trail included."""
        snapshot = self.to_json()
        snapshot.update(self.audit.to_dict())
        return snapshot
    
    @classmethod
    def from_snapshot(cls, snapshot: Mapping[str, Any]) -> 'PermissionEntity':
        """Rebuild an entity from ``to_snapshot()`` output.
        
        The status is restored as stored, without replaying transitions.
        
        Raises:
            InvalidSnapshotError: If the snapshot is malformed or describes an
                invalid permission
        """
        try:
            data = PermissionSnapshot.model_validate(snapshot)
        except ValidationError as e:
            raise InvalidSnapshotError(
                "Permission snapshot failed validation",
                errors=e.errors(include_url=False, include_context=False),
            ) from e
        
        try:
            return cls(
                id=PermissionId(data.id),
                resource=Resource(data.resource),
                action=Action(data.action),
                scope=PermissionScope(**data.scope.model_dump()),
                type=data.type,
                tenant_id=TenantId(data.tenant_id),
                settings=PermissionSettings(check_expiry=False, **data.settings.model_dump()),
                conditions=[
                    PermissionCondition(**condition.model_dump())
                    for condition in data.conditions
                ],
                status=data.status,
                audit=AuditInfo.from_dict(data.model_dump(by_alias=True, include=_AUDIT_FIELDS)),
            )
        except (PermissionDomainError, ValueError) as e:
            raise InvalidSnapshotError(
                f"Permission snapshot describes an invalid permission: {e}"
            ) from e
