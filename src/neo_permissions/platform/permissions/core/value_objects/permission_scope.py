"""Permission scope value object.

A scope places a permission in the platform > tenant > organization >
department > user hierarchy. Containment between scopes is what lets a
tenant-wide grant cover a request made inside one of its departments.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..exceptions import InvalidPermissionScopeError


class ScopeLevel(str, Enum):
    """Levels of the scope hierarchy, widest first."""
    
    PLATFORM = "platform"
    TENANT = "tenant"
    ORGANIZATION = "organization"
    DEPARTMENT = "department"
    USER = "user"
    
    def __str__(self) -> str:
        return self.value
    
    @property
    def priority(self) -> int:
        """Hierarchy depth, platform highest."""
        return LEVEL_PRIORITIES[self]


LEVEL_PRIORITIES = {
    ScopeLevel.PLATFORM: 5,
    ScopeLevel.TENANT: 4,
    ScopeLevel.ORGANIZATION: 3,
    ScopeLevel.DEPARTMENT: 2,
    ScopeLevel.USER: 1,
}

# Identifiers each level must carry
REQUIRED_IDS = {
    ScopeLevel.PLATFORM: (),
    ScopeLevel.TENANT: ("tenant_id",),
    ScopeLevel.ORGANIZATION: ("tenant_id", "organization_id"),
    ScopeLevel.DEPARTMENT: ("tenant_id", "organization_id", "department_id"),
    ScopeLevel.USER: ("tenant_id", "user_id"),
}

_ID_FIELDS = ("tenant_id", "organization_id", "department_id", "user_id")
_JSON_KEYS = {
    "tenant_id": "tenantId",
    "organization_id": "organizationId",
    "department_id": "departmentId",
    "user_id": "userId",
}


@dataclass(frozen=True)
class PermissionScope:
    """Immutable placement of a permission in the scope hierarchy."""
    
    level: ScopeLevel
    tenant_id: Optional[str] = None
    organization_id: Optional[str] = None
    department_id: Optional[str] = None
    user_id: Optional[str] = None
    
    def __post_init__(self) -> None:
        """Validate level and ancestor identifiers."""
        try:
            level = ScopeLevel(self.level.strip().lower() if isinstance(self.level, str) else self.level)
        except ValueError:
            supported = ", ".join(level.value for level in ScopeLevel)
            raise InvalidPermissionScopeError(
                f"Invalid permission scope level: {self.level}. Supported levels: {supported}",
                level=str(self.level),
            ) from None
        object.__setattr__(self, 'level', level)
        
        for name in _ID_FIELDS:
            raw = getattr(self, name)
            if raw is None:
                continue
            if not isinstance(raw, str):
                raw = str(raw)
            object.__setattr__(self, name, raw.strip() or None)
        
        missing = [name for name in REQUIRED_IDS[level] if getattr(self, name) is None]
        if missing:
            required = ", ".join(REQUIRED_IDS[level])
            raise InvalidPermissionScopeError(
                f"A {level.value} scope requires {required} (missing: {', '.join(missing)})",
                level=level.value,
            )
    
    @classmethod
    def platform(cls) -> 'PermissionScope':
        return cls(level=ScopeLevel.PLATFORM)
    
    @classmethod
    def tenant(cls, tenant_id: str) -> 'PermissionScope':
        return cls(level=ScopeLevel.TENANT, tenant_id=tenant_id)
    
    @classmethod
    def organization(cls, tenant_id: str, organization_id: str) -> 'PermissionScope':
        return cls(level=ScopeLevel.ORGANIZATION, tenant_id=tenant_id, organization_id=organization_id)
    
    @classmethod
    def department(cls, tenant_id: str, organization_id: str, department_id: str) -> 'PermissionScope':
        return cls(
            level=ScopeLevel.DEPARTMENT,
            tenant_id=tenant_id,
            organization_id=organization_id,
            department_id=department_id,
        )
    
    @classmethod
    def user(
        cls,
        tenant_id: str,
        user_id: str,
        organization_id: Optional[str] = None,
        department_id: Optional[str] = None,
    ) -> 'PermissionScope':
        return cls(
            level=ScopeLevel.USER,
            tenant_id=tenant_id,
            organization_id=organization_id,
            department_id=department_id,
            user_id=user_id,
        )
    
    @property
    def is_platform_level(self) -> bool:
        return self.level is ScopeLevel.PLATFORM
    
    @property
    def is_tenant_level(self) -> bool:
        return self.level is ScopeLevel.TENANT
    
    @property
    def is_organization_level(self) -> bool:
        return self.level is ScopeLevel.ORGANIZATION
    
    @property
    def is_department_level(self) -> bool:
        return self.level is ScopeLevel.DEPARTMENT
    
    @property
    def is_user_level(self) -> bool:
        return self.level is ScopeLevel.USER
    
    @property
    def level_priority(self) -> int:
        return self.level.priority
    
    def includes(self, other: 'PermissionScope') -> bool:
        """Check whether this scope contains ``other``.
        
        Containment is one-directional: a tenant scope includes the
        organizations, departments and users of the same tenant but never
        the platform.
        """
        if self == other:
            return True
        
        if self.is_platform_level:
            return True
        
        if self.is_tenant_level:
            if other.is_platform_level:
                return False
            return self.tenant_id == other.tenant_id
        
        if self.is_organization_level:
            if other.is_platform_level or other.is_tenant_level:
                return False
            return (
                self.tenant_id == other.tenant_id
                and self.organization_id == other.organization_id
            )
        
        if self.is_department_level:
            if not other.is_user_level:
                return False
            return (
                self.tenant_id == other.tenant_id
                and self.organization_id == other.organization_id
                and self.department_id == other.department_id
            )
        
        # user level only contains itself
        return self.tenant_id == other.tenant_id and self.user_id == other.user_id
    
    def intersects(self, other: 'PermissionScope') -> bool:
        """Check whether either scope contains the other."""
        return self.includes(other) or other.includes(self)
    
    def to_json(self) -> Dict[str, Any]:
        """Convert scope to dictionary; absent identifiers are omitted."""
        data: Dict[str, Any] = {"level": self.level.value}
        for name in _ID_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[_JSON_KEYS[name]] = value
        return data
    
    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'PermissionScope':
        """Create scope from its dictionary form (camelCase or snake_case keys)."""
        if not isinstance(data, Mapping):
            raise InvalidPermissionScopeError("Permission scope data cannot be empty")
        return cls(
            level=data.get("level"),
            **{name: data.get(_JSON_KEYS[name], data.get(name)) for name in _ID_FIELDS},
        )
    
    def __str__(self) -> str:
        parts = [self.level.value]
        if self.tenant_id:
            parts.append(f"tenant:{self.tenant_id}")
        if self.organization_id:
            parts.append(f"org:{self.organization_id}")
        if self.department_id:
            parts.append(f"dept:{self.department_id}")
        if self.user_id:
            parts.append(f"user:{self.user_id}")
        return ":".join(parts)
