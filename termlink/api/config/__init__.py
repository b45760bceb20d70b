"""Config API module."""

from .LinkConfig import LinkConfig
from .LogConfig import LogConfig
from .TermLinkConfig import TermLinkConfig

__all__ = ["LinkConfig", "LogConfig", "TermLinkConfig"]
