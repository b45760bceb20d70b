"""Registry of link matchers for a terminal session."""

import asyncio
import inspect
import re
from collections.abc import Iterable

from ...utils.logger import get_logger
from ..types.callbacks import LinkHandlerCallback
from ..types.HostElement import HostElement
from ..types.PointerEvent import PointerEvent
from ._arbitrate_spans import _arbitrate_spans
from .LinkSpan import LinkSpan
from .MatcherOptions import MatcherOptions
from .RegisteredMatcher import RegisteredMatcher

logger = get_logger("matcher")


class LinkMatcherRegistry:
    """Ordered collection of matchers producing disjoint clickable spans.

    Identifiers are handed out in registration order and never reused,
    so the id doubles as the tie-break between equal priorities.
    """

    def __init__(self):
        self._matchers: dict[int, RegisteredMatcher] = {}
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._matchers)

    @property
    def matchers(self) -> tuple[RegisteredMatcher, ...]:
        """Registered matchers in registration order."""
        return tuple(self._matchers.values())

    def get(self, matcher_id: int) -> RegisteredMatcher | None:
        return self._matchers.get(matcher_id)

    def register(
        self,
        pattern: str | re.Pattern[str],
        handler: LinkHandlerCallback,
        options: MatcherOptions | None = None,
    ) -> int:
        """Register a matcher and return its identifier.

        Raises:
            ValueError: If ``options.match_index`` is not a group of ``pattern``
        """
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        options = options or MatcherOptions()
        if options.match_index < 0 or options.match_index > regex.groups:
            raise ValueError(
                f"match_index {options.match_index} out of range for pattern with {regex.groups} groups"
            )

        matcher_id = self._next_id
        self._next_id += 1
        self._matchers[matcher_id] = RegisteredMatcher(
            matcher_id=matcher_id,
            regex=regex,
            handler=handler,
            options=options,
        )
        logger.debug("Registered matcher %d (priority %d): %s", matcher_id, options.priority, regex.pattern)
        return matcher_id

    def deregister(self, matcher_id: int) -> bool:
        removed = self._matchers.pop(matcher_id, None)
        if removed is not None:
            logger.debug("Deregistered matcher %d", matcher_id)
        return removed is not None

    def clear(self) -> None:
        """Drop every matcher (session teardown)."""
        self._matchers.clear()

    def find_spans(self, text: str) -> list[LinkSpan]:
        """Run every matcher over ``text`` and return the arbitrated spans ordered by offset."""
        candidates = [span for matcher in self._matchers.values() for span in matcher.find(text)]
        return _arbitrate_spans(candidates)

    async def validate(self, span: LinkSpan, element: HostElement) -> bool:
        """Confirm a span is a real link.

        Spans from matchers that have since been removed are never valid.
        A validation callback that raises is logged and counts as invalid.
        """
        matcher = self._matchers.get(span.matcher_id)
        if matcher is None:
            return False
        if matcher.validation_callback is None:
            return True
        try:
            outcome = matcher.validation_callback(span.text, element)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception as e:
            logger.warning("Validation of %r by matcher %d failed: %s", span.text, span.matcher_id, e)
            return False
        return bool(outcome)

    async def validate_all(self, pairs: Iterable[tuple[LinkSpan, HostElement]]) -> list[bool]:
        """Validate several spans concurrently; one outcome per pair, in input order."""
        return list(await asyncio.gather(*(self.validate(span, element) for span, element in pairs)))

    async def confirm_spans(self, pairs: Iterable[tuple[LinkSpan, HostElement]]) -> list[LinkSpan]:
        """Validate several spans concurrently and return the confirmed ones in input order."""
        pairs = list(pairs)
        outcomes = await self.validate_all(pairs)
        return [span for (span, _), valid in zip(pairs, outcomes) if valid]

    async def activate(self, span: LinkSpan, event: PointerEvent) -> bool | None:
        """Invoke the owning matcher's click handler for ``span``."""
        matcher = self._matchers.get(span.matcher_id)
        if matcher is None:
            return False
        outcome = matcher.handler(event, span.text)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return outcome
