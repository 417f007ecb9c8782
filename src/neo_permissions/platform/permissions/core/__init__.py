"""Permission domain core.

Value objects, the permission entity, its aggregate, domain events and
domain exceptions.
"""

from .aggregates import PermissionAggregate
from .entities import PermissionEntity, PermissionSnapshot
from .events import (
    PermissionCreatedEvent,
    PermissionDeletedEvent,
    PermissionRestoredEvent,
    PermissionStatusChangedEvent,
    PermissionUpdatedEvent,
)
from .exceptions import (
    InvalidActionError,
    InvalidPermissionConditionError,
    InvalidPermissionError,
    InvalidPermissionIdError,
    InvalidPermissionScopeError,
    InvalidPermissionSettingsError,
    InvalidResourceError,
    InvalidSnapshotError,
    InvalidStateTransitionError,
    PermissionNotFoundError,
)
from .value_objects import (
    Action,
    ActionCategory,
    ConditionOperator,
    PermissionCondition,
    PermissionId,
    PermissionScope,
    PermissionSettings,
    PermissionStatus,
    PermissionType,
    Resource,
    ScopeLevel,
    can_inherit_from,
    can_manage,
    inheritance_chain,
    required_scope_level,
    transition,
)

__all__ = [
    "PermissionAggregate",
    "PermissionEntity",
    "PermissionSnapshot",
    "PermissionCreatedEvent",
    "PermissionDeletedEvent",
    "PermissionRestoredEvent",
    "PermissionStatusChangedEvent",
    "PermissionUpdatedEvent",
    "InvalidActionError",
    "InvalidPermissionConditionError",
    "InvalidPermissionError",
    "InvalidPermissionIdError",
    "InvalidPermissionScopeError",
    "InvalidPermissionSettingsError",
    "InvalidResourceError",
    "InvalidSnapshotError",
    "InvalidStateTransitionError",
    "PermissionNotFoundError",
    "Action",
    "ActionCategory",
    "ConditionOperator",
    "PermissionCondition",
    "PermissionId",
    "PermissionScope",
    "PermissionSettings",
    "PermissionStatus",
    "PermissionType",
    "Resource",
    "ScopeLevel",
    "can_inherit_from",
    "can_manage",
    "inheritance_chain",
    "required_scope_level",
    "transition",
]
