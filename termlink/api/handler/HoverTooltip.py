"""Delayed follow-link tooltip for validated link elements."""

import asyncio
import weakref
from collections.abc import Callable
from typing import Protocol

from ..types.HostElement import HostElement
from .TooltipSurface import TooltipSurface


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


def _loop_call_later(delay: float, callback: Callable[[], None]) -> TimerHandle:
    return asyncio.get_running_loop().call_later(delay, callback)


def _default_scheduler() -> Scheduler:
    """Schedule on the loop running at attach time, or on whichever loop runs at hover time."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return _loop_call_later
    return loop.call_later


class _HoverBinding:
    """Hover state of one element: at most one pending timer."""

    def __init__(self, tooltip: "HoverTooltip", element: HostElement, call_later: Scheduler):
        self.tooltip = tooltip
        self.element = element
        self.call_later = call_later
        self.timer: TimerHandle | None = None

    def on_enter(self) -> None:
        self._cancel()
        self.timer = self.call_later(self.tooltip.delay, self._show)

    def on_leave(self) -> None:
        self._cancel()
        self.tooltip.surface.close_message()

    def _show(self) -> None:
        self.timer = None
        self.tooltip.surface.show_message(self.element.offset_left, self.element.offset_top, self.tooltip.message)

    def _cancel(self) -> None:
        if self.timer is not None:
            self.timer.cancel()
            self.timer = None


class HoverTooltip:
    """Shows ``message`` over an element after ``delay`` seconds of hovering.

    Leaving the element cancels a pending tooltip and closes any shown one.
    Each element is bound once; attaching it again is a no-op.
    """

    def __init__(
        self,
        surface: TooltipSurface,
        message: str,
        delay: float = 0.5,
        call_later: Scheduler | None = None,
    ):
        self.surface = surface
        self.message = message
        self.delay = delay
        self.call_later = call_later
        self._attached: weakref.WeakSet = weakref.WeakSet()

    def attach(self, element: HostElement) -> None:
        if element in self._attached:
            return
        self._attached.add(element)
        binding = _HoverBinding(self, element, self.call_later or _default_scheduler())
        element.add_event_listener("mouseenter", binding.on_enter)
        element.add_event_listener("mouseleave", binding.on_leave)
