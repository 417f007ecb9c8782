"""Invalid state transition exception."""

from typing import Any, Optional

from .....core.exceptions import PermissionDomainError


class InvalidStateTransitionError(PermissionDomainError):
    """Raised when a permission status change is not in the transition table.
    
    Carries both ends of the rejected transition so callers can report
    exactly which move was refused.
    """
    
    default_error_code = "INVALID_STATE_TRANSITION"
    
    def __init__(
        self,
        message: Optional[str] = None,
        *,
        from_status: Optional[Any] = None,
        to_status: Optional[Any] = None,
        operation: Optional[str] = None,
    ) -> None:
        from_value = getattr(from_status, "value", from_status)
        to_value = getattr(to_status, "value", to_status)
        
        if message is None:
            message = f"Permission status cannot change from {from_value} to {to_value}"
            if operation:
                message = f"Cannot {operation} permission: status {from_value} does not allow {to_value}"
        
        super().__init__(
            message,
            details={
                "from_status": from_value,
                "to_status": to_value,
                "operation": operation,
            },
        )
        self.from_status = from_status
        self.to_status = to_status
        self.operation = operation
