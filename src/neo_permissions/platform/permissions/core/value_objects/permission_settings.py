"""Permission settings value object.

Settings carry the lifecycle flags and the temporal, usage and approval
constraints of a permission. They never change in place: ``replace()``
returns a new, re-validated instance.
"""

from dataclasses import InitVar, dataclass, fields, replace as dataclass_replace
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from .....utils import utc_now, ensure_utc_optional, to_utc_string, from_utc_string
from ..exceptions import InvalidPermissionSettingsError


_JSON_KEYS = {
    "is_system_permission": "isSystemPermission",
    "is_default_permission": "isDefaultPermission",
    "can_be_deleted": "canBeDeleted",
    "can_be_modified": "canBeModified",
    "requires_approval": "requiresApproval",
    "is_sensitive": "isSensitive",
    "max_usage_count": "maxUsageCount",
    "expires_at": "expiresAt",
    "effective_from": "effectiveFrom",
    "effective_to": "effectiveTo",
}
_FLAG_FIELDS = (
    "is_system_permission",
    "is_default_permission",
    "can_be_deleted",
    "can_be_modified",
    "requires_approval",
    "is_sensitive",
)
_DATE_FIELDS = ("expires_at", "effective_from", "effective_to")


@dataclass(frozen=True)
class PermissionSettings:
    """Immutable constraints attached to a permission.
    
    Pass ``check_expiry=False`` only when restoring persisted settings, whose
    expiry may legitimately have passed since they were stored.
    """
    
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
    check_expiry: InitVar[bool] = True
    
    def __post_init__(self, check_expiry: bool) -> None:
        """Normalize flags and dates, then enforce cross-field rules."""
        for name in _FLAG_FIELDS:
            object.__setattr__(self, name, bool(getattr(self, name)))
        
        for name in _DATE_FIELDS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, datetime):
                raise InvalidPermissionSettingsError(f"{name} must be a datetime")
            object.__setattr__(self, name, ensure_utc_optional(value))
        
        if self.is_system_permission and self.can_be_deleted:
            raise InvalidPermissionSettingsError("System permissions cannot be deletable")
        
        if self.is_system_permission and not self.can_be_modified:
            raise InvalidPermissionSettingsError("System permissions must be modifiable")
        
        if self.is_default_permission and self.can_be_deleted:
            raise InvalidPermissionSettingsError("Default permissions cannot be deletable")
        
        if self.max_usage_count is not None:
            if isinstance(self.max_usage_count, bool) or not isinstance(self.max_usage_count, int):
                raise InvalidPermissionSettingsError("Maximum usage count must be an integer")
            if self.max_usage_count < 0:
                raise InvalidPermissionSettingsError("Maximum usage count cannot be negative")
        
        if (
            self.effective_from is not None
            and self.effective_to is not None
            and self.effective_from >= self.effective_to
        ):
            raise InvalidPermissionSettingsError("effective_from must be earlier than effective_to")
        
        if check_expiry and self.expires_at is not None and self.expires_at <= utc_now():
            raise InvalidPermissionSettingsError("Expiry time must be in the future")
    
    @classmethod
    def default(cls) -> 'PermissionSettings':
        """Settings for an ordinary, unrestricted permission."""
        return cls()
    
    @classmethod
    def system(cls) -> 'PermissionSettings':
        """Settings for a built-in system permission."""
        return cls(is_system_permission=True, can_be_deleted=False, can_be_modified=True)
    
    def replace(self, **changes: Any) -> 'PermissionSettings':
        """Return a new validated instance with the given fields changed."""
        return dataclass_replace(self, **changes)
    
    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return (ensure_utc_optional(now) or utc_now()) > self.expires_at
    
    def is_effective(self, now: Optional[datetime] = None) -> bool:
        """Check whether ``now`` lies inside the effective window.
        
        A missing bound leaves that side of the window open.
        """
        now = ensure_utc_optional(now) or utc_now()
        if self.effective_from is not None and now < self.effective_from:
            return False
        if self.effective_to is not None and now > self.effective_to:
            return False
        return True
    
    @property
    def has_usage_limit(self) -> bool:
        return self.max_usage_count is not None
    
    @property
    def has_time_restriction(self) -> bool:
        return any(getattr(self, name) is not None for name in _DATE_FIELDS)
    
    @property
    def is_restricted(self) -> bool:
        return (
            self.has_usage_limit
            or self.has_time_restriction
            or self.requires_approval
            or self.is_sensitive
        )
    
    def restriction_description(self) -> str:
        """Human-readable summary of the active restrictions."""
        restrictions = []
        
        if self.has_usage_limit:
            restrictions.append(f"max usage count: {self.max_usage_count}")
        if self.effective_from is not None:
            restrictions.append(f"effective from: {to_utc_string(self.effective_from)}")
        if self.effective_to is not None:
            restrictions.append(f"effective to: {to_utc_string(self.effective_to)}")
        if self.expires_at is not None:
            restrictions.append(f"expires at: {to_utc_string(self.expires_at)}")
        if self.requires_approval:
            restrictions.append("requires approval")
        if self.is_sensitive:
            restrictions.append("sensitive")
        
        return ", ".join(restrictions) if restrictions else "no restrictions"
    
    def to_json(self) -> Dict[str, Any]:
        """Convert settings to dictionary with ISO-8601 dates."""
        data: Dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, datetime):
                value = to_utc_string(value)
            data[_JSON_KEYS[item.name]] = value
        return data
    
    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'PermissionSettings':
        """Restore settings from their dictionary form.
        
        The future-expiry rule is not applied: it guards new commands, not
        state that was valid when it was stored.
        """
        if not isinstance(data, Mapping):
            raise InvalidPermissionSettingsError("Permission settings data cannot be empty")
        
        kwargs: Dict[str, Any] = {}
        for name, key in _JSON_KEYS.items():
            if key in data:
                value = data[key]
            elif name in data:
                value = data[name]
            else:
                continue
            if name in _DATE_FIELDS and isinstance(value, str):
                try:
                    value = from_utc_string(value)
                except ValueError as e:
                    raise InvalidPermissionSettingsError(str(e)) from e
            kwargs[name] = value
        
        return cls(check_expiry=False, **kwargs)
