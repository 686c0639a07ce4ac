"""Extensible, zero-terminated, binary-safe byte buffers."""

from .buffer import (
    AllocationFailure,
    AllocationLimitExceeded,
    BufferScanner,
    BufferUnderrun,
    BufferView,
    ExtensibleBufferError,
    GrowableBuffer,
    InvalidArgument,
)
from .runtime import BufferConfig

__all__ = [
    "AllocationFailure",
    "AllocationLimitExceeded",
    "BufferConfig",
    "BufferScanner",
    "BufferUnderrun",
    "BufferView",
    "ExtensibleBufferError",
    "GrowableBuffer",
    "InvalidArgument",
]

__version__ = "0.1.0"
