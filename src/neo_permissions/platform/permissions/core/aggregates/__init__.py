"""Permission aggregates."""

from .permission_aggregate import PermissionAggregate

__all__ = ["PermissionAggregate"]
