"""Validation model for persisted permission snapshots.

Snapshots come from outside the engine, so they are checked field by field
before any value object is rebuilt from them.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..value_objects import PermissionStatus, PermissionType


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ConditionSnapshot(_SnapshotModel):
    field: str = Field(min_length=1)
    operator: str = Field(min_length=1)
    value: Any = None
    description: Optional[str] = None


class ScopeSnapshot(_SnapshotModel):
    level: str = Field(min_length=1)
    tenant_id: Optional[str] = None
    organization_id: Optional[str] = None
    department_id: Optional[str] = None
    user_id: Optional[str] = None


class SettingsSnapshot(_SnapshotModel):
    is_system_permission: bool = False
    is_default_permission: bool = False
    can_be_deleted: bool = True
    can_be_modified: bool = True
    requires_approval: bool = False
    is_sensitive: bool = False
    max_usage_count: Optional[int] = None
    expires_at: Optional[datetime] = None
    effective_from: Optional[datetime] = None
    effective_to: Optional[datetime] = None


class PermissionSnapshot(_SnapshotModel):
    """Full persisted state of a permission entity."""
    
    id: str
    resource: str
    action: str
    conditions: List[ConditionSnapshot] = Field(default_factory=list)
    scope: ScopeSnapshot
    type: PermissionType
    status: PermissionStatus
    settings: SettingsSnapshot = Field(default_factory=SettingsSnapshot)
    tenant_id: str = Field(min_length=1)
    created_by: str = Field(min_length=1)
    created_at: datetime
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None
    version: int = Field(default=1, ge=1)
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[str] = None


class AggregateSnapshot(_SnapshotModel):
    """Persisted aggregate: the entity snapshot plus the event version."""
    
    permission: Optional[PermissionSnapshot] = None
    version: int = Field(default=0, ge=0)
