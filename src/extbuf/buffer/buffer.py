"""Extensible, zero-terminated, binary-safe byte buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from extbuf.runtime import telemetry
from extbuf.runtime.config import BufferConfig, load_config

from .errors import AllocationFailure, AllocationLimitExceeded, InvalidArgument
from .growth import next_capacity
from .state import BufferStats
from .validation import ensure_byte, ensure_count

BytesLike = Union[bytes, bytearray, memoryview]

TERMINATOR = 0
SPACE = b" "


@dataclass(frozen=True, slots=True)
class BufferView:
    length: int
    capacity: int
    cursor: int
    content: bytes


def _allocate(size: int) -> bytearray:
    try:
        return bytearray(size)
    except MemoryError as exc:
        raise AllocationFailure(
            f"unable to allocate {size} bytes", requested=size
        ) from exc


class GrowableBuffer:
    """Owned byte storage with a length, a capacity and a consumer cursor.

    ``capacity`` is always greater than ``length`` and the byte at offset
    ``length`` is always zero, so the content can be handed to consumers that
    expect a terminated string. Embedded zero bytes are kept as data; the
    terminator never determines the length.

    Not thread-safe. ``cursor`` belongs to whoever scans the buffer and is
    never moved by append, reset or ensure_capacity.
    """

    def __init__(
        self, *, name: str = "default", config: Optional[BufferConfig] = None
    ) -> None:
        self.name = name
        self.config = config or load_config()
        self._data = _allocate(self.config.initial_capacity)
        self._length = 0
        self._cursor = 0
        self.stats = BufferStats(peak_capacity=self.config.initial_capacity)

    @classmethod
    def from_bytes(
        cls,
        data: BytesLike,
        *,
        name: str = "default",
        config: Optional[BufferConfig] = None,
    ) -> "GrowableBuffer":
        buffer = cls(name=name, config=config)
        buffer.append_bytes(data)
        return buffer

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, value: int) -> None:
        self._cursor = ensure_count(value, argument="cursor")

    def reset(self, *, shrink: bool = False) -> None:
        """Empty the buffer, keeping the allocation unless ``shrink`` is set.

        With ``shrink`` the storage is replaced by a fresh allocation of
        ``config.initial_capacity`` bytes. The cursor is left alone.
        """

        if shrink and self.capacity != self.config.initial_capacity:
            self._data = _allocate(self.config.initial_capacity)
        self._length = 0
        self._data[0] = TERMINATOR

    def ensure_capacity(self, additional: int) -> None:
        """Make room for ``additional`` more bytes plus the terminator."""

        additional = ensure_count(additional, argument="additional")
        required = self._length + additional + 1
        current = self.capacity
        if required <= current:
            return

        try:
            target = next_capacity(current, required, self.config.max_alloc_size)
        except AllocationLimitExceeded as exc:
            telemetry.record_event(
                "buffer.allocation_limit",
                level="warning",
                data={
                    "buffer": self.name,
                    "length": self._length,
                    "requested": exc.requested,
                    "limit": exc.limit,
                },
            )
            raise
        self._grow(target)

    def _grow(self, target: int) -> None:
        before = self.capacity
        with telemetry.span("buffer::grow", metadata={"buffer": self.name}) as handle:
            try:
                self._data.extend(bytes(target - before))
            except MemoryError as exc:
                raise AllocationFailure(
                    f"unable to grow buffer to {target} bytes", requested=target
                ) from exc
            handle.add_metadata("capacity", target)

        self.stats.record_growth(target)
        telemetry.record_event(
            "buffer.grow",
            level="debug",
            data={
                "buffer": self.name,
                "length": self._length,
                "from": before,
                "to": target,
            },
        )

    def _write(self, chunk: bytes) -> None:
        self.ensure_capacity(len(chunk))
        end = self._length + len(chunk)
        self._data[self._length : end] = chunk
        self._data[end] = TERMINATOR
        self._length = end

    def append_bytes(self, data: BytesLike, length: Optional[int] = None) -> None:
        """Copy ``data`` (or its first ``length`` bytes) onto the end.

        Room is reserved before the input is copied, so oversized input is
        rejected without materializing it.
        """

        if isinstance(data, str):
            raise InvalidArgument("use append_text for str input", argument="data")
        try:
            view = memoryview(data)
        except TypeError:
            raise InvalidArgument(
                f"expected a bytes-like object, got {type(data).__name__}",
                argument="data",
            ) from None

        with view:
            size = view.nbytes
            if length is not None:
                length = ensure_count(length, argument="length")
                if length > size:
                    raise InvalidArgument(
                        f"length {length} exceeds the {size} bytes supplied",
                        argument="length",
                    )
                size = length
            self.ensure_capacity(size)
            chunk = view.tobytes()[:size]
        self._write(chunk)

    def append_text(self, text: Union[str, BytesLike]) -> None:
        """Append ``text``; ``str`` values are encoded as UTF-8."""

        if isinstance(text, str):
            try:
                encoded = text.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise InvalidArgument(str(exc), argument="text") from exc
            self._write(encoded)
            return
        if not isinstance(text, (bytes, bytearray, memoryview)):
            raise InvalidArgument(
                f"expected str or bytes, got {type(text).__name__}", argument="text"
            )
        self.append_bytes(text)

    def append_byte(self, value: Union[int, bytes]) -> None:
        byte = ensure_byte(value)
        if self._length + 1 >= len(self._data):
            self.ensure_capacity(1)
        self._data[self._length] = byte
        self._length += 1
        self._data[self._length] = TERMINATOR

    def append_spaces(self, count: int) -> None:
        count = ensure_count(count, argument="count")
        self.ensure_capacity(count)
        self._write(SPACE * count)

    def getvalue(self) -> bytes:
        return bytes(self._data[: self._length])

    def terminated(self) -> bytes:
        """Content followed by its terminator byte."""

        return bytes(self._data[: self._length + 1])

    def read_at(self, offset: int, size: int) -> bytes:
        """Copy up to ``size`` content bytes starting at ``offset``."""

        offset = ensure_count(offset, argument="offset")
        size = ensure_count(size, argument="size")
        end = min(offset + size, self._length)
        return bytes(self._data[offset:end]) if offset < end else b""

    def find(self, value: int, start: int = 0) -> int:
        """Offset of the first ``value`` byte in ``[start, length)``, or -1."""

        start = ensure_count(start, argument="start")
        return self._data.find(ensure_byte(value), start, self._length)

    def byte_at(self, offset: int) -> int:
        offset = ensure_count(offset, argument="offset")
        if offset > self._length:
            raise InvalidArgument(
                f"offset {offset} is past the terminator at {self._length}",
                argument="offset",
            )
        return self._data[offset]

    def snapshot(self) -> BufferView:
        return BufferView(
            length=self._length,
            capacity=self.capacity,
            cursor=self._cursor,
            content=self.getvalue(),
        )

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return self.getvalue()

    def __repr__(self) -> str:
        return (
            f"GrowableBuffer(name={self.name!r}, length={self._length}, "
            f"capacity={self.capacity}, cursor={self._cursor})"
        )
