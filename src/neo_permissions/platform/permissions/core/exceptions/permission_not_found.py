"""Permission not found exception."""

from .....core.exceptions import PermissionDomainError


class PermissionNotFoundError(PermissionDomainError):
    """Raised when a command targets an aggregate that holds no permission."""
    
    default_error_code = "PERMISSION_NOT_FOUND"
    
    def __init__(self, message: str = "Permission does not exist") -> None:
        super().__init__(message)
