"""Neo-Permissions Platform Modules.

Modules:
- permissions: Permission policy model with scopes, conditions, settings
  and the permission lifecycle

Each module follows maximum separation architecture with one purpose per
file under ``core/``: entities, value objects, events, exceptions and
aggregates.
"""

from . import permissions

__all__ = [
    "permissions",
]
