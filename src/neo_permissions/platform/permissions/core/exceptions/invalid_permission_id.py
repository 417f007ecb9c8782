"""Invalid permission identifier exception."""

from typing import Any, Optional

from .....core.exceptions import PermissionDomainError


class InvalidPermissionIdError(PermissionDomainError):
    """Raised when a permission ID is not a valid UUID."""
    
    default_error_code = "INVALID_PERMISSION_ID"
    
    def __init__(self, message: str, *, value: Optional[Any] = None, **details: Any) -> None:
        if value is not None:
            details["value"] = value
        super().__init__(message, details=details)
        self.value = value
