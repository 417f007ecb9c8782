"""Permission value objects."""

from .resource import Resource
from .action import Action, ActionCategory
from .permission_id import PermissionId
from .permission_condition import ConditionOperator, PermissionCondition
from .permission_scope import PermissionScope, ScopeLevel
from .permission_settings import PermissionSettings
from .permission_status import PermissionStatus, transition
from .permission_type import (
    PermissionType,
    can_inherit_from,
    can_manage,
    has_higher_level,
    has_lower_level,
    has_same_level,
    inheritance_chain,
    required_scope_level,
)

__all__ = [
    "Resource",
    "Action",
    "ActionCategory",
    "PermissionId",
    "ConditionOperator",
    "PermissionCondition",
    "PermissionScope",
    "ScopeLevel",
    "PermissionSettings",
    "PermissionStatus",
    "transition",
    "PermissionType",
    "can_inherit_from",
    "can_manage",
    "has_higher_level",
    "has_lower_level",
    "has_same_level",
    "inheritance_chain",
    "required_scope_level",
]
