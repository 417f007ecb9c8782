"""Shared domain event base for neo-permissions."""

from .domain_event import DomainEvent

__all__ = [
    "DomainEvent",
]
