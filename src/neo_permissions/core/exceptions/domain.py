"""Domain exception roots.

Every business-rule violation raised by the permission engine derives from
PermissionDomainError. These are expected, recoverable failures: the engine
never retries or recovers from them itself.
"""

from typing import Any, Dict, Optional

from .base import NeoPermissionsError


class PermissionDomainError(NeoPermissionsError):
    """Base class for permission business-rule violations."""
    
    default_error_code = "PERMISSION_DOMAIN_ERROR"
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            error_code=error_code or self.default_error_code,
            details=details,
        )
