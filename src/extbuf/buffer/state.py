"""Growth bookkeeping for buffers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BufferStats:
    """Counts reallocations and tracks the largest capacity reached."""

    grow_count: int = 0
    peak_capacity: int = 0

    def record_growth(self, capacity: int) -> None:
        self.grow_count += 1
        self.peak_capacity = max(self.peak_capacity, capacity)
