"""Operating system family."""

import sys
from enum import Enum


class PlatformFamily(str, Enum):
    """Target OS family of a terminal session."""

    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"

    @classmethod
    def detect(cls, platform: str | None = None) -> "PlatformFamily":
        """Map a ``sys.platform`` string to a family (defaults to the running interpreter)."""
        platform = platform if platform is not None else sys.platform
        if platform.startswith("win") or platform == "cygwin":
            return cls.WINDOWS
        if platform == "darwin":
            return cls.MAC
        return cls.LINUX
