"""Audit information value object.

Tracks who created and last changed an entity, its optimistic-concurrency
version and soft-deletion markers. Every change produces a new instance.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Optional

from ...utils import utc_now, ensure_utc, ensure_utc_optional, to_utc_string, from_utc_string


@dataclass(frozen=True)
class AuditInfo:
    """Immutable audit trail for an entity."""
    
    created_by: str = "system"
    created_at: datetime = field(default_factory=utc_now)
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None
    version: int = 1
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[str] = None
    
    def __post_init__(self) -> None:
        """Validate and normalize audit state."""
        if not self.created_by or not isinstance(self.created_by, str):
            raise ValueError("created_by is required")
        if self.version < 1:
            raise ValueError("Version must be greater than 0")
        
        object.__setattr__(self, 'created_at', ensure_utc(self.created_at))
        if self.updated_at is None:
            object.__setattr__(self, 'updated_at', self.created_at)
        else:
            object.__setattr__(self, 'updated_at', ensure_utc(self.updated_at))
        if self.updated_by is None:
            object.__setattr__(self, 'updated_by', self.created_by)
        object.__setattr__(self, 'deleted_at', ensure_utc_optional(self.deleted_at))
        
        if self.deleted_at is not None and not self.deleted_by:
            raise ValueError("deleted_by is required when entity is deleted")
    
    @classmethod
    def create(cls, created_by: str) -> 'AuditInfo':
        """Audit info for a freshly created entity."""
        return cls(created_by=created_by, created_at=utc_now())
    
    @property
    def is_deleted(self) -> bool:
        """Check if the entity carries a soft-delete marker."""
        return self.deleted_at is not None
    
    def touched(self, updated_by: str) -> 'AuditInfo':
        """Return a copy recording a change by the given actor."""
        return replace(
            self,
            updated_by=updated_by,
            updated_at=utc_now(),
            version=self.version + 1,
        )
    
    def deleted(self, deleted_by: str) -> 'AuditInfo':
        """Return a copy carrying a soft-delete marker."""
        now = utc_now()
        return replace(
            self,
            updated_by=deleted_by,
            updated_at=now,
            version=self.version + 1,
            deleted_at=now,
            deleted_by=deleted_by,
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert audit info to dictionary with ISO dates."""
        return {
            "createdBy": self.created_by,
            "createdAt": to_utc_string(self.created_at),
            "updatedBy": self.updated_by,
            "updatedAt": to_utc_string(self.updated_at),
            "version": self.version,
            "deletedAt": to_utc_string(self.deleted_at) if self.deleted_at else None,
            "deletedBy": self.deleted_by,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuditInfo':
        """Create AuditInfo from dictionary representation."""
        return cls(
            created_by=data["createdBy"],
            created_at=_parse_datetime(data["createdAt"]),
            updated_by=data.get("updatedBy"),
            updated_at=_parse_datetime(data.get("updatedAt")),
            version=data.get("version", 1),
            deleted_at=_parse_datetime(data.get("deletedAt")),
            deleted_by=data.get("deletedBy"),
        )


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return from_utc_string(value)
