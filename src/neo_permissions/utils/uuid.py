"""UUID utilities for neo-permissions."""

import uuid
import time
from typing import Optional


def generate_uuid_v7() -> str:
    """
    Generate a UUIDv7 with time-based ordering.
    
    Permission identifiers sort by creation time, which keeps event streams
    and snapshot stores ordered without a separate sequence.
    
    Returns:
        String representation of UUIDv7
    """
    # Get current timestamp in milliseconds
    timestamp_ms = int(time.time() * 1000)
    
    # Create timestamp bytes (48 bits)
    timestamp_bytes = timestamp_ms.to_bytes(6, byteorder='big')
    
    # Generate random bytes for the rest (80 bits)
    random_bytes = uuid.uuid4().bytes[6:]
    
    uuid_bytes = timestamp_bytes + random_bytes
    
    # Set version to 7 (bits 12-15 of the 7th byte)
    uuid_bytes = uuid_bytes[:6] + bytes([(uuid_bytes[6] & 0x0f) | 0x70]) + uuid_bytes[7:]
    
    # Set variant to 10 (bits 6-7 of the 9th byte)  
    uuid_bytes = uuid_bytes[:8] + bytes([(uuid_bytes[8] & 0x3f) | 0x80]) + uuid_bytes[9:]
    
    return str(uuid.UUID(bytes=uuid_bytes))


def is_valid_uuid(uuid_str: str, version: Optional[int] = None) -> bool:
    """
    Check if string is a valid UUID.
    
    Args:
        uuid_str: String to validate
        version: Optional specific version to check (4, 7, etc.)
        
    Returns:
        True if valid UUID, False otherwise
    """
    try:
        uuid_obj = uuid.UUID(uuid_str)
        
        if version is not None:
            return uuid_obj.version == version
            
        return True
        
    except (ValueError, TypeError, AttributeError):
        return False


def normalize_uuid(uuid_str: str) -> str:
    """Return the canonical lowercase hyphenated form of a UUID string."""
    return str(uuid.UUID(uuid_str))
