"""Utilities module for neo-permissions.

This module provides utility functions and helpers used throughout
the neo-permissions library.
"""

from .uuid import (
    generate_uuid_v7,
    is_valid_uuid,
    normalize_uuid,
)
from .timezone import (
    utc_now,
    ensure_utc,
    ensure_utc_optional,
    to_utc_string,
    from_utc_string,
)

__all__ = [
    # UUID Generation
    "generate_uuid_v7",
    "is_valid_uuid",
    "normalize_uuid",
    # Timezone Utilities
    "utc_now",
    "ensure_utc",
    "ensure_utc_optional",
    "to_utc_string",
    "from_utc_string",
]
