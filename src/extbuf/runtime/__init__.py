"""Runtime services: configuration, platform facts, telemetry."""

from .config import BufferConfig, load_config
from .platform import BUILD_CAPABILITIES, MAX_ALLOC_SIZE, PlatformCapabilities

__all__ = [
    "BUILD_CAPABILITIES",
    "BufferConfig",
    "MAX_ALLOC_SIZE",
    "PlatformCapabilities",
    "load_config",
]
