"""Resource value object.

A resource names the protected object a permission applies to. Names are
dotted and namespaced by their first segment (``tenant.settings``,
``user.profile``).
"""

import re
from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidResourceError


@dataclass(frozen=True)
class Resource:
    """Immutable, normalized resource identifier.
    
    Input is trimmed and lowercased before validation, so ``Resource("User")``
    and ``Resource(" user ")`` are equal.
    """
    
    value: str
    
    MIN_LENGTH = 1
    MAX_LENGTH = 100
    VALID_PATTERN = re.compile(r'^[a-z][a-z0-9._-]*$')
    RESERVED_WORDS = frozenset({"system", "admin", "root", "api", "internal"})
    
    def __post_init__(self) -> None:
        """Normalize and validate the resource name."""
        if not isinstance(self.value, str):
            raise InvalidResourceError("Resource name must be a string", value=repr(self.value))
        
        normalized = self.value.strip().lower()
        object.__setattr__(self, 'value', normalized)
        
        if len(normalized) < self.MIN_LENGTH:
            raise InvalidResourceError("Resource name cannot be empty")
        
        if len(normalized) > self.MAX_LENGTH:
            raise InvalidResourceError(
                f"Resource name cannot exceed {self.MAX_LENGTH} characters",
                value=normalized,
            )
        
        if not self.VALID_PATTERN.fullmatch(normalized):
            raise InvalidResourceError(
                "Resource name must start with a letter and contain only letters, "
                "digits, dots, underscores and hyphens",
                value=normalized,
            )
        
        if normalized in self.RESERVED_WORDS:
            raise InvalidResourceError(
                f"Resource name cannot be a reserved word: {', '.join(sorted(self.RESERVED_WORDS))}",
                value=normalized,
            )
    
    @property
    def resource_type(self) -> str:
        """First dotted segment of the name."""
        return self.value.split('.')[0] or self.value
    
    @property
    def resource_sub_type(self) -> Optional[str]:
        """Second dotted segment, if any."""
        parts = self.value.split('.')
        return parts[1] if len(parts) > 1 else None
    
    def _has_namespace(self, namespace: str) -> bool:
        return self.value.startswith(f"{namespace}.")
    
    @property
    def is_system_resource(self) -> bool:
        return self._has_namespace("system")
    
    @property
    def is_platform_resource(self) -> bool:
        return self._has_namespace("platform")
    
    @property
    def is_tenant_resource(self) -> bool:
        return self._has_namespace("tenant")
    
    @property
    def is_organization_resource(self) -> bool:
        return self._has_namespace("organization")
    
    @property
    def is_department_resource(self) -> bool:
        return self._has_namespace("department")
    
    @property
    def is_user_resource(self) -> bool:
        return self._has_namespace("user")
    
    def to_json(self) -> str:
        """Serialized form used in events and snapshots."""
        return self.value
    
    def __str__(self) -> str:
        return self.value
