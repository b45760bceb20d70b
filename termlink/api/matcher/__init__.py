"""Link matcher registry and arbitration."""

from .LinkMatcherRegistry import LinkMatcherRegistry
from .LinkSpan import LinkSpan
from .MatcherOptions import MatcherOptions
from .RegisteredMatcher import RegisteredMatcher

__all__ = ["LinkMatcherRegistry", "LinkSpan", "MatcherOptions", "RegisteredMatcher"]
