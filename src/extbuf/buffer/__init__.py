"""Growable byte buffer, its growth policy, and cursor-based scanning."""

from .buffer import BufferView, GrowableBuffer
from .errors import (
    AllocationFailure,
    AllocationLimitExceeded,
    BufferUnderrun,
    ExtensibleBufferError,
    InvalidArgument,
)
from .growth import next_capacity
from .scanner import BufferScanner
from .state import BufferStats

__all__ = [
    "AllocationFailure",
    "AllocationLimitExceeded",
    "BufferScanner",
    "BufferStats",
    "BufferUnderrun",
    "BufferView",
    "ExtensibleBufferError",
    "GrowableBuffer",
    "InvalidArgument",
    "next_capacity",
]
