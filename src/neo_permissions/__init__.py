"""Neo-Permissions - permission policy engine for the NeoMultiTenant platform.

Decides whether an access request is authorized by combining resources,
actions, hierarchical scopes, runtime conditions and permission settings,
and manages the permission lifecycle through an event-recording aggregate.
"""

from .__version__ import __version__

# Initialize logging configuration on import
from .config import get_settings, setup_logging
if get_settings().configure_logging_on_import:
    setup_logging()

from .config import (
    EngineSettings,
    LogFormat,
    LogVerbosity,
    LoggingConfig,
    reset_settings,
)

from .core.exceptions import (
    NeoPermissionsError,
    PermissionDomainError,
    create_error_response,
)

from .core.value_objects import TenantId
from .core.entities import AuditInfo
from .core.events import DomainEvent

from .platform.permissions import (
    # Aggregate and entity
    PermissionAggregate,
    PermissionEntity,
    PermissionSnapshot,
    
    # Events
    PermissionCreatedEvent,
    PermissionUpdatedEvent,
    PermissionStatusChangedEvent,
    PermissionDeletedEvent,
    PermissionRestoredEvent,
    
    # Value objects
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
    
    # Type and status helpers
    can_inherit_from,
    can_manage,
    inheritance_chain,
    required_scope_level,
    transition,
    
    # Exceptions
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

__all__ = [
    "__version__",
    # Configuration
    "EngineSettings",
    "LogFormat",
    "LogVerbosity",
    "LoggingConfig",
    "get_settings",
    "reset_settings",
    "setup_logging",
    # Shared kernel
    "NeoPermissionsError",
    "PermissionDomainError",
    "create_error_response",
    "TenantId",
    "AuditInfo",
    "DomainEvent",
    # Permissions
    "PermissionAggregate",
    "PermissionEntity",
    "PermissionSnapshot",
    "PermissionCreatedEvent",
    "PermissionUpdatedEvent",
    "PermissionStatusChangedEvent",
    "PermissionDeletedEvent",
    "PermissionRestoredEvent",
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
]
