"""Permission status and its transition table.

The table below is the single source of truth for the permission state
machine. ``transition()`` is a pure function over it; the entity's
lifecycle methods all route through it.
"""

from enum import Enum
from typing import FrozenSet, Optional

from ..exceptions import InvalidStateTransitionError


class PermissionStatus(str, Enum):
    """Lifecycle states of a permission."""
    
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    DELETED = "DELETED"
    EXPIRED = "EXPIRED"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    REJECTED = "REJECTED"
    
    def __str__(self) -> str:
        return self.value
    
    @property
    def is_terminal(self) -> bool:
        """No transition leaves a terminal status."""
        return not TRANSITIONS[self]
    
    @property
    def is_active(self) -> bool:
        return self is PermissionStatus.ACTIVE
    
    @property
    def is_pending(self) -> bool:
        return self is PermissionStatus.PENDING_APPROVAL
    
    @property
    def is_inactive(self) -> bool:
        return self in INACTIVE_STATUSES
    
    @property
    def is_modifiable(self) -> bool:
        """Statuses in which the permission definition may be edited."""
        return self in MODIFIABLE_STATUSES
    
    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]
    
    @property
    def description(self) -> str:
        return DESCRIPTIONS[self]
    
    def next_valid_statuses(self) -> FrozenSet['PermissionStatus']:
        return TRANSITIONS[self]
    
    def can_transition_to(self, target: 'PermissionStatus') -> bool:
        return target in TRANSITIONS[self]


TRANSITIONS = {
    PermissionStatus.ACTIVE: frozenset({
        PermissionStatus.INACTIVE,
        PermissionStatus.SUSPENDED,
        PermissionStatus.DELETED,
        PermissionStatus.EXPIRED,
    }),
    PermissionStatus.INACTIVE: frozenset({
        PermissionStatus.ACTIVE,
        PermissionStatus.DELETED,
        PermissionStatus.EXPIRED,
    }),
    PermissionStatus.SUSPENDED: frozenset({
        PermissionStatus.ACTIVE,
        PermissionStatus.INACTIVE,
        PermissionStatus.DELETED,
        PermissionStatus.EXPIRED,
    }),
    PermissionStatus.PENDING_APPROVAL: frozenset({
        PermissionStatus.ACTIVE,
        PermissionStatus.REJECTED,
        PermissionStatus.DELETED,
    }),
    PermissionStatus.REJECTED: frozenset({
        PermissionStatus.PENDING_APPROVAL,
        PermissionStatus.DELETED,
    }),
    PermissionStatus.DELETED: frozenset(),
    PermissionStatus.EXPIRED: frozenset(),
}

INACTIVE_STATUSES = frozenset({
    PermissionStatus.INACTIVE,
    PermissionStatus.SUSPENDED,
    PermissionStatus.DELETED,
    PermissionStatus.EXPIRED,
    PermissionStatus.REJECTED,
})

MODIFIABLE_STATUSES = frozenset({
    PermissionStatus.ACTIVE,
    PermissionStatus.INACTIVE,
    PermissionStatus.SUSPENDED,
    PermissionStatus.PENDING_APPROVAL,
})

DISPLAY_NAMES = {
    PermissionStatus.ACTIVE: "Active",
    PermissionStatus.INACTIVE: "Inactive",
    PermissionStatus.SUSPENDED: "Suspended",
    PermissionStatus.DELETED: "Deleted",
    PermissionStatus.EXPIRED: "Expired",
    PermissionStatus.PENDING_APPROVAL: "Pending approval",
    PermissionStatus.REJECTED: "Rejected",
}

DESCRIPTIONS = {
    PermissionStatus.ACTIVE: "Permission is in effect",
    PermissionStatus.INACTIVE: "Permission is temporarily unavailable",
    PermissionStatus.SUSPENDED: "Permission use has been suspended",
    PermissionStatus.DELETED: "Permission has been deleted",
    PermissionStatus.EXPIRED: "Permission has expired",
    PermissionStatus.PENDING_APPROVAL: "Permission is waiting for approval",
    PermissionStatus.REJECTED: "Permission request was rejected",
}


def transition(
    current: PermissionStatus,
    target: PermissionStatus,
    operation: Optional[str] = None,
) -> PermissionStatus:
    """Validate a status change against the transition table.
    
    Args:
        current: Status the permission is in
        target: Status requested
        operation: Name of the lifecycle operation, for the error message
        
    Returns:
        The target status
        
    Raises:
        InvalidStateTransitionError: If the table does not allow the move
    """
    current = PermissionStatus(current)
    target = PermissionStatus(target)
    if target not in TRANSITIONS[current]:
        raise InvalidStateTransitionError(
            from_status=current,
            to_status=target,
            operation=operation,
        )
    return target
