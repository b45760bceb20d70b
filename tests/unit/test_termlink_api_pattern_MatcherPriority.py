"""Unit tests for termlink.api.pattern.MatcherPriority."""

from termlink.api.pattern.MatcherPriority import MatcherPriority


def test_priority_values():
    assert MatcherPriority.HYPERTEXT == 0
    assert MatcherPriority.CUSTOM == -1
    assert MatcherPriority.LOCAL_PATH == -2


def test_priority_ordering():
    assert MatcherPriority.HYPERTEXT > MatcherPriority.CUSTOM > MatcherPriority.LOCAL_PATH
