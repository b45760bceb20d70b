"""Callback signatures exchanged with the host matcher runtime."""

from collections.abc import Awaitable, Callable

from .HostElement import HostElement
from .PointerEvent import PointerEvent

# (event, uri) -> False when the click was suppressed; may return an awaitable
LinkHandlerCallback = Callable[[PointerEvent, str], bool | None | Awaitable[bool | None]]

# (uri, element) -> whether the match is a real link
ValidationCallback = Callable[[str, HostElement], bool | Awaitable[bool]]
