"""Sequential reads driven by a buffer's cursor."""

from __future__ import annotations

from typing import Optional

from .buffer import TERMINATOR, GrowableBuffer
from .errors import BufferUnderrun
from .validation import ensure_count


class BufferScanner:
    """Consume a ``GrowableBuffer`` front to back.

    All position state lives in ``buffer.cursor``, so a scan can be resumed by
    another scanner or adjusted by hand. The buffer must not be appended to
    while a scan is in progress.
    """

    def __init__(self, buffer: GrowableBuffer) -> None:
        self.buffer = buffer

    @property
    def remaining(self) -> int:
        """Bytes left unread."""
        return max(self.buffer.length - self.buffer.cursor, 0)

    def _take(self, size: int) -> bytes:
        start = self.buffer.cursor
        chunk = self.buffer.read_at(start, size)
        self.buffer.cursor = start + len(chunk)
        return chunk

    def read(self, size: Optional[int] = None) -> bytes:
        """Return up to ``size`` bytes (the remainder if None) and advance."""
        if size is None:
            return self._take(self.remaining)
        return self._take(min(ensure_count(size, argument="size"), self.remaining))

    def read_exact(self, size: int) -> bytes:
        size = ensure_count(size, argument="size")
        if size > self.remaining:
            raise BufferUnderrun(
                f"insufficient data: wanted {size} bytes, {self.remaining} left",
                requested=size,
                available=self.remaining,
            )
        return self._take(size)

    def read_byte(self) -> int:
        return self.read_exact(1)[0]

    def read_cstring(self) -> bytes:
        """Return bytes up to the next zero byte and step past it.

        The zero must occur before ``length``; the buffer's own terminator
        does not count.
        """

        start = self.buffer.cursor
        end = self.buffer.find(TERMINATOR, start)
        if end < 0:
            raise BufferUnderrun(
                "unterminated string in buffer",
                requested=self.remaining + 1,
                available=self.remaining,
            )
        value = self.buffer.read_at(start, end - start)
        self.buffer.cursor = end + 1
        return value

    def rewind(self) -> None:
        """Reset cursor to the start."""
        self.buffer.cursor = 0
