"""Static table of build-time platform facts.

The values mirror what the database build's configure step recorded for its
target (64-bit, little-endian, GCC atomics available). Nothing here is probed
at runtime; consumers only ask whether a fact is available and read its value.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

MAX_ALLOC_SIZE = 0x3FFFFFFF  # 1 GiB - 1


@dataclass(frozen=True, slots=True)
class PlatformCapabilities:
    sizeof_void_p: int = 8
    sizeof_size_t: int = 8
    sizeof_long: int = 8
    maximum_alignof: int = 8
    block_size: int = 8192
    words_bigendian: bool = False
    have_builtin_bswap32: bool = True
    have_sync_int32_cas: bool = True
    have_sync_int64_cas: bool = True
    have_long_int_64: bool = True
    max_alloc_size: int = MAX_ALLOC_SIZE

    @property
    def byteorder(self) -> str:
        return "big" if self.words_bigendian else "little"

    def has(self, name: str) -> bool:
        """Return whether the boolean fact ``name`` is available.

        Unknown names and integer-valued facts raise ``KeyError``.
        """

        known = {f.name: f for f in fields(self)}
        if name not in known:
            raise KeyError(name)
        value = getattr(self, name)
        if not isinstance(value, bool):
            raise KeyError(f"{name} is not a boolean capability")
        return value


BUILD_CAPABILITIES = PlatformCapabilities()


def has(name: str) -> bool:
    return BUILD_CAPABILITIES.has(name)


__all__ = ["BUILD_CAPABILITIES", "MAX_ALLOC_SIZE", "PlatformCapabilities", "has"]
