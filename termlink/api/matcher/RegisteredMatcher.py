import re
from collections.abc import Iterator
from dataclasses import dataclass

from ..types.callbacks import LinkHandlerCallback, ValidationCallback
from .LinkSpan import LinkSpan
from .MatcherOptions import MatcherOptions


@dataclass(frozen=True)
class RegisteredMatcher:
    """A matcher as stored by the registry. Never mutated after registration."""

    matcher_id: int
    regex: re.Pattern[str]
    handler: LinkHandlerCallback
    options: MatcherOptions

    @property
    def priority(self) -> int:
        return self.options.priority

    @property
    def match_index(self) -> int:
        return self.options.match_index

    @property
    def validation_callback(self) -> ValidationCallback | None:
        return self.options.validation_callback

    def find(self, text: str) -> Iterator[LinkSpan]:
        """Yield every non-empty span this matcher's pattern finds in ``text``."""
        for match in self.regex.finditer(text):
            link = match.group(self.match_index)
            if not link:
                continue
            yield LinkSpan(
                matcher_id=self.matcher_id,
                start=match.start(self.match_index),
                end=match.end(self.match_index),
                text=link,
                priority=self.priority,
            )
