"""Invalid resource exception."""

from typing import Any, Optional

from .....core.exceptions import PermissionDomainError


class InvalidResourceError(PermissionDomainError):
    """Raised when a resource identifier fails normalization or validation."""
    
    default_error_code = "INVALID_RESOURCE"
    
    def __init__(self, message: str, *, value: Optional[Any] = None, **details: Any) -> None:
        if value is not None:
            details["value"] = value
        super().__init__(message, details=details)
        self.value = value
