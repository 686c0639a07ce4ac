"""Capacity growth policy."""

from __future__ import annotations

from .errors import AllocationLimitExceeded


def next_capacity(current: int, required: int, ceiling: int) -> int:
    """Return the capacity to allocate so that ``required`` bytes fit.

    ``current`` is doubled until it covers ``required`` and the result is
    clamped to ``ceiling``. Doubling keeps the number of reallocations for N
    single-byte appends at O(log N). ``required`` already includes the
    terminator byte.
    """

    if required > ceiling:
        raise AllocationLimitExceeded(
            f"cannot grow buffer to {required} bytes, limit is {ceiling}",
            requested=required,
            limit=ceiling,
        )
    if required <= current:
        return current

    capacity = max(current, 1)
    while capacity < required:
        capacity *= 2
    # required <= ceiling, so clamping never undershoots
    return min(capacity, ceiling)
