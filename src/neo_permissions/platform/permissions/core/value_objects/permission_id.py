"""Permission ID value object."""

from dataclasses import dataclass

from .....utils import generate_uuid_v7, is_valid_uuid, normalize_uuid
from ..exceptions import InvalidPermissionIdError


@dataclass(frozen=True)
class PermissionId:
    """
    Permission ID value object.
    
    Wraps a UUID string. New identifiers are UUIDv7 so they sort by
    creation time; any valid UUID is accepted when loading existing state.
    """
    
    value: str
    
    def __post_init__(self):
        """Validate and normalize the identifier."""
        if not isinstance(self.value, str) or not is_valid_uuid(self.value):
            raise InvalidPermissionIdError(
                f"Invalid permission ID: {self.value!r}",
                value=self.value,
            )
        object.__setattr__(self, 'value', normalize_uuid(self.value))
    
    @classmethod
    def generate(cls) -> 'PermissionId':
        """Generate a new PermissionId using UUIDv7."""
        return cls(generate_uuid_v7())
    
    def __str__(self) -> str:
        return self.value
