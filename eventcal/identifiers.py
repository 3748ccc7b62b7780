"""Conversion of identifier-like values to UUID."""

from typing import Any
from uuid import UUID


def to_uuid(value: Any) -> UUID:
    """Convert an identifier-like value to a UUID.

    Accepts a UUID, its string form, its 16 raw bytes, its integer value, or
    any object with an ``id`` attribute holding a UUID (such as an Event).

    Args:
        value: Value to convert.

    Returns:
        The corresponding UUID.

    Raises:
        TypeError: If the value's type cannot represent an identifier.
        ValueError: If a string, bytes or int value is malformed.
    """
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        return UUID(value)
    if isinstance(value, (bytes, bytearray)):
        return UUID(bytes=bytes(value))
    if isinstance(value, int) and not isinstance(value, bool):
        return UUID(int=value)
    if isinstance(getattr(value, "id", None), UUID):
        return value.id
    raise TypeError(f"Cannot convert {type(value).__name__} to UUID")
