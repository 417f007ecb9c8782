"""Invalid permission scope exception."""

from typing import Optional

from .....core.exceptions import PermissionDomainError


class InvalidPermissionScopeError(PermissionDomainError):
    """Raised when a scope level is unknown or an ancestor identifier is missing."""
    
    default_error_code = "INVALID_PERMISSION_SCOPE"
    
    def __init__(self, message: str, *, level: Optional[str] = None) -> None:
        super().__init__(message, details={"level": level} if level is not None else None)
        self.level = level
