"""Invalid permission settings exception."""

from .....core.exceptions import PermissionDomainError


class InvalidPermissionSettingsError(PermissionDomainError):
    """Raised when settings flags or time bounds contradict each other."""
    
    default_error_code = "INVALID_PERMISSION_SETTINGS"
