"""Priority tiers for registered matchers."""

from enum import IntEnum


class MatcherPriority(IntEnum):
    """Higher value wins when spans from different matchers overlap."""

    HYPERTEXT = 0
    # Higher than local link, lower than hypertext
    CUSTOM = -1
    # Lowest
    LOCAL_PATH = -2
