"""Platform abstraction layer."""

from .detection import (
    Platform,
    detect_platform,
    platform_from_identifier,
)
from .process import (
    CommandRunner,
    DefaultCommandRunner,
    ProcessError,
    run_streaming,
)

__all__ = [
    # detection
    "Platform",
    "detect_platform",
    "platform_from_identifier",
    # process
    "CommandRunner",
    "DefaultCommandRunner",
    "ProcessError",
    "run_streaming",
]
