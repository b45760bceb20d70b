from dataclasses import dataclass

from ..pattern.MatcherPriority import MatcherPriority
from ..types.callbacks import ValidationCallback


@dataclass(frozen=True)
class MatcherOptions:
    """Registration options for a link matcher.

    ``match_index`` selects the capture group holding the link text (0 is the whole match).
    A matcher without ``validation_callback`` is clickable as soon as it matches.
    """

    match_index: int = 0
    validation_callback: ValidationCallback | None = None
    priority: int = MatcherPriority.HYPERTEXT
