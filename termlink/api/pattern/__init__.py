"""Pattern library: local path grammars, hypertext pattern, matcher priorities."""

from .HYPERTEXT_PATTERN import HYPERTEXT_PATTERN
from .LinkPattern import LinkPattern
from .local_link_pattern import (
    LOCAL_LINK_MATCH_INDEX,
    UNIX_LIKE_LOCAL_LINK,
    WINDOWS_LOCAL_LINK,
    local_link_pattern,
)
from .MatcherPriority import MatcherPriority

__all__ = [
    "HYPERTEXT_PATTERN",
    "LOCAL_LINK_MATCH_INDEX",
    "UNIX_LIKE_LOCAL_LINK",
    "WINDOWS_LOCAL_LINK",
    "LinkPattern",
    "MatcherPriority",
    "local_link_pattern",
]
