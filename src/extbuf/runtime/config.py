"""Buffer sizing configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .platform import BUILD_CAPABILITIES
from .telemetry import ENV_PREFIX

DEFAULT_INITIAL_CAPACITY = 1024


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class BufferConfig:
    """Initial allocation and allocation ceiling for a ``GrowableBuffer``."""

    initial_capacity: int = DEFAULT_INITIAL_CAPACITY
    max_alloc_size: int = BUILD_CAPABILITIES.max_alloc_size

    def __post_init__(self) -> None:
        for name in ("initial_capacity", "max_alloc_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int")
        if self.initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        if self.initial_capacity > self.max_alloc_size:
            raise ValueError("initial_capacity cannot exceed max_alloc_size")


def load_config() -> BufferConfig:
    """Build a config from ``EXTBUF_INITIAL_CAPACITY``/``EXTBUF_MAX_ALLOC_SIZE``."""

    return BufferConfig(
        initial_capacity=_env_int("INITIAL_CAPACITY", DEFAULT_INITIAL_CAPACITY),
        max_alloc_size=_env_int("MAX_ALLOC_SIZE", BUILD_CAPABILITIES.max_alloc_size),
    )


__all__ = ["BufferConfig", "DEFAULT_INITIAL_CAPACITY", "load_config"]
