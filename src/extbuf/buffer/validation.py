"""Argument checks shared by buffer and scanner operations."""

from __future__ import annotations

from .errors import InvalidArgument


def ensure_count(value: object, *, argument: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{argument} must be an int", argument=argument)
    if value < 0:
        raise InvalidArgument(f"{argument} cannot be negative", argument=argument)
    return value


def ensure_byte(value: object) -> int:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise InvalidArgument("expected exactly one byte", argument="value")
        return value[0]
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument("byte must be an int or a single byte", argument="value")
    if not 0 <= value <= 0xFF:
        raise InvalidArgument("byte out of range 0..255", argument="value")
    return value
