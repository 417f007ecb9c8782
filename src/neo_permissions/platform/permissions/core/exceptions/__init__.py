"""Permission domain exceptions.

One exception per kind of rule violation. All derive from
PermissionDomainError and are raised synchronously where the rule is checked.
"""

from .invalid_resource import InvalidResourceError
from .invalid_action import InvalidActionError
from .invalid_permission_id import InvalidPermissionIdError
from .invalid_permission_condition import InvalidPermissionConditionError
from .invalid_permission_scope import InvalidPermissionScopeError
from .invalid_permission_settings import InvalidPermissionSettingsError
from .invalid_permission import InvalidPermissionError
from .invalid_state_transition import InvalidStateTransitionError
from .permission_not_found import PermissionNotFoundError
from .invalid_snapshot import InvalidSnapshotError

__all__ = [
    "InvalidResourceError",
    "InvalidActionError",
    "InvalidPermissionIdError",
    "InvalidPermissionConditionError",
    "InvalidPermissionScopeError",
    "InvalidPermissionSettingsError",
    "InvalidPermissionError",
    "InvalidStateTransitionError",
    "PermissionNotFoundError",
    "InvalidSnapshotError",
]
