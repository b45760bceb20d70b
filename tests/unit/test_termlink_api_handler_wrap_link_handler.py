"""Unit tests for termlink.api.handler.wrap_link_handler."""

from termlink.api.handler.wrap_link_handler import wrap_link_handler
from termlink.api.types.ClickEvent import ClickEvent


def _ctrl(event):
    return event.ctrl_key


def test_without_modifier_suppresses_and_skips_handler():
    calls = []
    wrapped = wrap_link_handler(_ctrl, lambda uri: calls.append(uri))
    event = ClickEvent()

    assert wrapped(event, "/tmp/a") is False
    assert event.default_prevented is True
    assert calls == []


def test_with_modifier_calls_handler():
    wrapped = wrap_link_handler(_ctrl, lambda uri: f"opened {uri}")
    event = ClickEvent(ctrl_key=True)

    assert wrapped(event, "/tmp/a") == "opened /tmp/a"
    assert event.default_prevented is False


def test_modifier_check_is_pluggable():
    wrapped = wrap_link_handler(lambda event: event.meta_key, lambda uri: True)
    assert wrapped(ClickEvent(ctrl_key=True), "x") is False
    assert wrapped(ClickEvent(meta_key=True), "x") is True
