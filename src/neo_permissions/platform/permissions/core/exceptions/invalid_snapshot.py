"""Invalid snapshot exception."""

from typing import Any, Dict, List, Optional

from .....core.exceptions import PermissionDomainError


class InvalidSnapshotError(PermissionDomainError):
    """Raised when a persisted snapshot cannot be turned back into an entity."""
    
    default_error_code = "INVALID_SNAPSHOT"
    
    def __init__(self, message: str, *, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message, details={"errors": errors or []})
        self.errors = errors or []
