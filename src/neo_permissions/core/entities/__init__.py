"""Shared entity building blocks for neo-permissions."""

from .audit_info import AuditInfo

__all__ = [
    "AuditInfo",
]
