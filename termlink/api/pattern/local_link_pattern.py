"""Platform selection for the local path grammar."""

from ..platform.PlatformFamily import PlatformFamily
from ._constants import (
    UNIX_ESCAPED_EXCLUDED_PATH_CHARACTERS,
    UNIX_EXCLUDED_PATH_CHARACTERS,
    UNIX_PATH_PREFIX,
    UNIX_PATH_SEPARATOR,
    WINDOWS_EXCLUDED_PATH_CHARACTERS,
    WINDOWS_PATH_PREFIX,
    WINDOWS_PATH_SEPARATOR,
)
from .LinkPattern import LinkPattern

# Capture group holding the link text in both grammars
LOCAL_LINK_MATCH_INDEX = 1

# Matches paths in the form /path, ~/path, ./path, ../path
UNIX_LIKE_LOCAL_LINK = LinkPattern(
    name="unix",
    prefix=UNIX_PATH_PREFIX,
    separator=UNIX_PATH_SEPARATOR,
    excluded=UNIX_EXCLUDED_PATH_CHARACTERS,
    escaped=UNIX_ESCAPED_EXCLUDED_PATH_CHARACTERS,
)

# Matches paths in the form c:\path, ~\path, .\path
WINDOWS_LOCAL_LINK = LinkPattern(
    name="windows",
    prefix=WINDOWS_PATH_PREFIX,
    separator=WINDOWS_PATH_SEPARATOR,
    excluded=WINDOWS_EXCLUDED_PATH_CHARACTERS,
)


def local_link_pattern(family: PlatformFamily) -> LinkPattern:
    """Return the local path grammar for a platform family."""
    if family is PlatformFamily.WINDOWS:
        return WINDOWS_LOCAL_LINK
    return UNIX_LIKE_LOCAL_LINK
