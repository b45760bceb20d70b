"""Modifier-key gate for link click handlers."""

from collections.abc import Awaitable, Callable

from ..types.callbacks import LinkHandlerCallback
from ..types.PointerEvent import PointerEvent


def wrap_link_handler(
    modifier_check: Callable[[PointerEvent], bool],
    handler: Callable[[str], bool | None | Awaitable[bool | None]],
) -> LinkHandlerCallback:
    """Compose ``handler`` with a modifier check.

    Without the modifier the event's default action is prevented, ``handler``
    is not called, and the wrapped callback returns False.
    """

    def wrapped(event: PointerEvent, uri: str) -> bool | None | Awaitable[bool | None]:
        # Require ctrl/cmd on click
        if not modifier_check(event):
            event.prevent_default()
            return False
        return handler(uri)

    return wrapped
