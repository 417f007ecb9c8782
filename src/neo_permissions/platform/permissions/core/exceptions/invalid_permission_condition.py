"""Invalid permission condition exception."""

from typing import Any, Optional

from .....core.exceptions import PermissionDomainError


class InvalidPermissionConditionError(PermissionDomainError):
    """Raised when a condition has an unknown operator, an empty field
    or a value that does not fit its operator."""
    
    default_error_code = "INVALID_PERMISSION_CONDITION"
    
    def __init__(self, message: str, *, field: Optional[str] = None, operator: Optional[Any] = None) -> None:
        details = {}
        if field is not None:
            details["field"] = field
        if operator is not None:
            details["operator"] = str(operator)
        super().__init__(message, details=details)
        self.field = field
        self.operator = operator
