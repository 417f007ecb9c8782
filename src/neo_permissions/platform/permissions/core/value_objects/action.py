"""Action value object.

An action names the operation being authorized on a resource. Standard
actions are classified into read, write and admin categories and carry a
fixed priority used when ranking grants.
"""

import re
from dataclasses import dataclass
from enum import Enum

from ..exceptions import InvalidActionError


class ActionCategory(str, Enum):
    """Category an action falls into."""
    
    READ = "read"
    WRITE = "write"
    ADMIN = "admin"
    CUSTOM = "custom"
    
    def __str__(self) -> str:
        return self.value


READ_ACTIONS = frozenset({"read", "list", "search", "export"})
WRITE_ACTIONS = frozenset({"create", "update", "delete", "import"})
ADMIN_ACTIONS = frozenset({
    "approve", "reject", "assign", "revoke",
    "activate", "deactivate", "suspend", "restore",
})
STANDARD_ACTIONS = READ_ACTIONS | WRITE_ACTIONS | ADMIN_ACTIONS | {"archive"}
DESTRUCTIVE_ACTIONS = frozenset({"delete", "revoke", "suspend", "archive"})

# Higher number means higher priority; unknown actions rank 0
ACTION_PRIORITIES = {
    "read": 1,
    "list": 1,
    "search": 1,
    "export": 2,
    "create": 3,
    "import": 3,
    "update": 4,
    "delete": 5,
    "approve": 6,
    "reject": 6,
    "assign": 7,
    "revoke": 7,
    "activate": 8,
    "deactivate": 8,
    "suspend": 9,
    "restore": 9,
    "archive": 10,
}


@dataclass(frozen=True)
class Action:
    """Immutable, normalized action identifier."""
    
    value: str
    
    MIN_LENGTH = 1
    MAX_LENGTH = 50
    VALID_PATTERN = re.compile(r'^[a-z][a-z0-9._-]*$')
    
    def __post_init__(self) -> None:
        """Normalize and validate the action name."""
        if not isinstance(self.value, str):
            raise InvalidActionError("Action name must be a string", value=repr(self.value))
        
        normalized = self.value.strip().lower()
        object.__setattr__(self, 'value', normalized)
        
        if len(normalized) < self.MIN_LENGTH:
            raise InvalidActionError("Action name cannot be empty")
        
        if len(normalized) > self.MAX_LENGTH:
            raise InvalidActionError(
                f"Action name cannot exceed {self.MAX_LENGTH} characters",
                value=normalized,
            )
        
        if not self.VALID_PATTERN.fullmatch(normalized):
            raise InvalidActionError(
                "Action name must start with a letter and contain only letters, "
                "digits, dots, underscores and hyphens",
                value=normalized,
            )
    
    @property
    def is_standard_action(self) -> bool:
        return self.value in STANDARD_ACTIONS
    
    @property
    def is_read_action(self) -> bool:
        return self.value in READ_ACTIONS
    
    @property
    def is_write_action(self) -> bool:
        return self.value in WRITE_ACTIONS
    
    @property
    def is_admin_action(self) -> bool:
        return self.value in ADMIN_ACTIONS
    
    @property
    def category(self) -> ActionCategory:
        """Category of the action; read wins over write, write over admin."""
        if self.is_read_action:
            return ActionCategory.READ
        if self.is_write_action:
            return ActionCategory.WRITE
        if self.is_admin_action:
            return ActionCategory.ADMIN
        return ActionCategory.CUSTOM
    
    @property
    def priority(self) -> int:
        return ACTION_PRIORITIES.get(self.value, 0)
    
    @property
    def requires_confirmation(self) -> bool:
        return self.value in DESTRUCTIVE_ACTIONS
    
    @property
    def is_destructive(self) -> bool:
        return self.value in DESTRUCTIVE_ACTIONS
    
    def to_json(self) -> str:
        """Serialized form used in events and snapshots."""
        return self.value
    
    def __str__(self) -> str:
        return self.value
