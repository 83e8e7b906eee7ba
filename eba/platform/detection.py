"""Host platform detection.

The packaging tool takes the target platform as a flag (--mac, --windows,
--linux), so the platform names here match those flags.
"""

from __future__ import annotations

import sys as _sys
from enum import Enum
from functools import lru_cache

__all__ = [
    "Platform",
    "detect_platform",
    "platform_from_identifier",
]


class Platform(Enum):
    """Operating system the action runs on."""

    MAC = "mac"
    WINDOWS = "windows"
    LINUX = "linux"

    def __str__(self) -> str:
        return self.value

    @property
    def builder_flag(self) -> str:
        """Packaging tool flag selecting this platform, e.g. "--mac"."""
        return f"--{self.value}"


def platform_from_identifier(identifier: str) -> Platform:
    """Map a sys.platform style identifier to a Platform.

    Anything unrecognized is treated as Linux.
    """
    system = identifier.lower()
    if system.startswith("darwin"):
        return Platform.MAC
    if system.startswith(("win32", "cygwin", "msys")):
        return Platform.WINDOWS
    return Platform.LINUX


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system (cached)."""
    # NOTE: avoid platform.system() on Windows, it may query WMI and hang.
    return platform_from_identifier(_sys.platform)
