"""Exceptions module for neo-permissions."""

from .base import (
    NeoPermissionsError,
    create_error_response,
)
from .domain import PermissionDomainError

__all__ = [
    "NeoPermissionsError",
    "PermissionDomainError",
    "create_error_response",
]
