"""Errors raised by buffer operations.

A raised error always leaves the buffer exactly as it was before the call.
"""

from __future__ import annotations


class ExtensibleBufferError(RuntimeError):
    """Base class for buffer failures."""


class AllocationLimitExceeded(ExtensibleBufferError):
    """Requested size would exceed the configured allocation ceiling."""

    def __init__(self, message: str, *, requested: int, limit: int) -> None:
        super().__init__(message)
        self.requested = requested
        self.limit = limit


class AllocationFailure(ExtensibleBufferError):
    """The allocator could not provide the requested storage."""

    def __init__(self, message: str, *, requested: int) -> None:
        super().__init__(message)
        self.requested = requested


class InvalidArgument(ExtensibleBufferError, ValueError):
    def __init__(self, message: str, *, argument: str) -> None:
        super().__init__(message)
        self.argument = argument


class BufferUnderrun(ExtensibleBufferError):
    """A scanner read asked for more bytes than remain before ``length``."""

    def __init__(self, message: str, *, requested: int, available: int) -> None:
        super().__init__(message)
        self.requested = requested
        self.available = available
