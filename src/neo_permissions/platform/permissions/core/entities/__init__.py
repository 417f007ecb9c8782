"""Permission entities."""

from .permission import PermissionEntity
from .snapshot import AggregateSnapshot, PermissionSnapshot

__all__ = [
    "PermissionEntity",
    "PermissionSnapshot",
    "AggregateSnapshot",
]
