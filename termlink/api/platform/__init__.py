"""Platform facts for a terminal session."""

from .EnvironmentAccessor import EnvironmentAccessor
from .EnvironmentSnapshot import EnvironmentSnapshot
from .PlatformContext import PlatformContext
from .PlatformFamily import PlatformFamily

__all__ = ["EnvironmentAccessor", "EnvironmentSnapshot", "PlatformContext", "PlatformFamily"]
