"""Invalid permission exception."""

from typing import Any

from .....core.exceptions import PermissionDomainError


class InvalidPermissionError(PermissionDomainError):
    """Raised for composite violations across a permission's parts.
    
    Covers missing parts, type/scope level mismatches and condition list
    violations (cap, duplicates, unknown condition on removal).
    """
    
    default_error_code = "INVALID_PERMISSION"
    
    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, details=details)
