"""Timezone utilities for neo-permissions.

All timestamps handled by the permission engine are UTC-aware. Naive values
coming from callers or persisted snapshots are interpreted as UTC.
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC datetime with timezone awareness.
    
    Single source of truth for "now" so tests can patch one function.
    
    Returns:
        Current UTC datetime with timezone info
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensure datetime has UTC timezone.
    
    If datetime is naive (no timezone), assumes it's UTC and adds timezone info.
    If datetime has timezone, converts to UTC.
    
    Args:
        dt: Datetime to process
        
    Returns:
        UTC datetime with timezone info
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    elif dt.tzinfo != timezone.utc:
        return dt.astimezone(timezone.utc)
    return dt


def ensure_utc_optional(dt: Optional[datetime]) -> Optional[datetime]:
    """Like ensure_utc but passes None through."""
    return ensure_utc(dt) if dt is not None else None


def to_utc_string(dt: datetime) -> str:
    """
    Convert datetime to UTC ISO format string.
    
    Args:
        dt: Datetime to convert
        
    Returns:
        ISO format UTC string (e.g., "2024-01-15T10:30:45.123456Z")
    """
    utc_dt = ensure_utc(dt)
    return utc_dt.isoformat().replace('+00:00', 'Z')


def from_utc_string(iso_string: str) -> datetime:
    """
    Parse UTC ISO format string to datetime.
    
    Args:
        iso_string: ISO format string
        
    Returns:
        UTC datetime with timezone info
        
    Raises:
        ValueError: If string format is invalid
    """
    try:
        # Handle 'Z' suffix
        if iso_string.endswith('Z'):
            iso_string = iso_string[:-1] + '+00:00'
        
        dt = datetime.fromisoformat(iso_string)
        return ensure_utc(dt)
        
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid ISO datetime format: {iso_string}") from e
