"""Value objects for shared identifiers in neo-permissions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TenantId:
    """Tenant identifier value object with basic validation."""
    value: str
    
    def __post_init__(self):
        if not self.value or not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Tenant ID must be a non-empty string")
        object.__setattr__(self, 'value', self.value.strip())
    
    def __str__(self) -> str:
        return self.value

