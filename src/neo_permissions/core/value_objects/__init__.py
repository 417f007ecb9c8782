"""Shared value objects for neo-permissions."""

from .identifiers import TenantId

__all__ = [
    "TenantId",
]
