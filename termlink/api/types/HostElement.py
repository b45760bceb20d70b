from collections.abc import Callable
from typing import Protocol


class HostElement(Protocol):
    """Rendered element for a link span (DOM-like)."""

    offset_left: int
    offset_top: int

    def add_event_listener(self, event_name: str, listener: Callable[[], None]) -> None: ...
