"""Permission type classification.

The type of a permission fixes the scope level it must be placed at and
decides which permissions a holder of it may manage.
"""

from enum import Enum
from typing import List

from .permission_scope import ScopeLevel


class PermissionType(str, Enum):
    """Classification of a permission."""
    
    PLATFORM = "PLATFORM"
    TENANT = "TENANT"
    ORGANIZATION = "ORGANIZATION"
    DEPARTMENT = "DEPARTMENT"
    USER = "USER"
    SYSTEM = "SYSTEM"
    CUSTOM = "CUSTOM"
    
    def __str__(self) -> str:
        return self.value
    
    @property
    def level(self) -> int:
        return TYPE_LEVELS[self]
    
    @property
    def required_scope_level(self) -> ScopeLevel:
        return REQUIRED_SCOPE_LEVELS[self]
    
    @property
    def is_hierarchical(self) -> bool:
        return self in HIERARCHICAL_TYPES
    
    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]
    
    @property
    def description(self) -> str:
        return DESCRIPTIONS[self]


TYPE_LEVELS = {
    PermissionType.SYSTEM: 6,
    PermissionType.PLATFORM: 5,
    PermissionType.TENANT: 4,
    PermissionType.ORGANIZATION: 3,
    PermissionType.DEPARTMENT: 2,
    PermissionType.USER: 1,
    PermissionType.CUSTOM: 0,
}

REQUIRED_SCOPE_LEVELS = {
    PermissionType.PLATFORM: ScopeLevel.PLATFORM,
    PermissionType.SYSTEM: ScopeLevel.PLATFORM,
    PermissionType.TENANT: ScopeLevel.TENANT,
    PermissionType.CUSTOM: ScopeLevel.TENANT,
    PermissionType.ORGANIZATION: ScopeLevel.ORGANIZATION,
    PermissionType.DEPARTMENT: ScopeLevel.DEPARTMENT,
    PermissionType.USER: ScopeLevel.USER,
}

# Ordered high to low
HIERARCHICAL_TYPES = (
    PermissionType.PLATFORM,
    PermissionType.TENANT,
    PermissionType.ORGANIZATION,
    PermissionType.DEPARTMENT,
    PermissionType.USER,
)

NON_HIERARCHICAL_TYPES = (PermissionType.SYSTEM, PermissionType.CUSTOM)

DISPLAY_NAMES = {
    PermissionType.PLATFORM: "Platform",
    PermissionType.TENANT: "Tenant",
    PermissionType.ORGANIZATION: "Organization",
    PermissionType.DEPARTMENT: "Department",
    PermissionType.USER: "User",
    PermissionType.SYSTEM: "System",
    PermissionType.CUSTOM: "Custom",
}

DESCRIPTIONS = {
    PermissionType.PLATFORM: "Affects the whole platform",
    PermissionType.TENANT: "Affects a single tenant",
    PermissionType.ORGANIZATION: "Affects a single organization",
    PermissionType.DEPARTMENT: "Affects a single department",
    PermissionType.USER: "Affects a single user",
    PermissionType.SYSTEM: "Reserved for internal system use",
    PermissionType.CUSTOM: "Defined by a tenant",
}


def required_scope_level(permission_type: PermissionType) -> ScopeLevel:
    """Scope level a permission of this type must be placed at."""
    return REQUIRED_SCOPE_LEVELS[PermissionType(permission_type)]


def has_higher_level(first: PermissionType, second: PermissionType) -> bool:
    return first.level > second.level


def has_lower_level(first: PermissionType, second: PermissionType) -> bool:
    return first.level < second.level


def has_same_level(first: PermissionType, second: PermissionType) -> bool:
    return first.level == second.level


def can_manage(manager_type: PermissionType, target_type: PermissionType) -> bool:
    """Check whether a holder of ``manager_type`` may manage ``target_type``.
    
    SYSTEM manages everything, PLATFORM everything but SYSTEM. Between
    hierarchical types the manager must sit at the same or a higher level.
    CUSTOM only manages CUSTOM. Any other combination is refused.
    """
    manager_type = PermissionType(manager_type)
    target_type = PermissionType(target_type)
    
    if manager_type is PermissionType.SYSTEM:
        return True
    
    if manager_type is PermissionType.PLATFORM:
        return target_type is not PermissionType.SYSTEM
    
    if manager_type.is_hierarchical and target_type.is_hierarchical:
        return manager_type.level >= target_type.level
    
    if manager_type is PermissionType.CUSTOM:
        return target_type is PermissionType.CUSTOM
    
    return False


def inheritance_chain(permission_type: PermissionType) -> List[PermissionType]:
    """Types whose grants apply to ``permission_type``, highest first.
    
    Non-hierarchical types only inherit from themselves.
    """
    permission_type = PermissionType(permission_type)
    if not permission_type.is_hierarchical:
        return [permission_type]
    
    return [
        candidate for candidate in HIERARCHICAL_TYPES
        if candidate.level >= permission_type.level
    ]


def can_inherit_from(child_type: PermissionType, parent_type: PermissionType) -> bool:
    """Check whether grants of ``parent_type`` flow down to ``child_type``."""
    if not child_type.is_hierarchical or not parent_type.is_hierarchical:
        return False
    return parent_type.level > child_type.level
