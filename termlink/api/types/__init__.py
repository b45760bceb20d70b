"""Host-facing types shared by the matcher registry and the link handler."""

from .callbacks import LinkHandlerCallback, ValidationCallback
from .ClickEvent import ClickEvent
from .HostElement import HostElement
from .PointerEvent import PointerEvent

__all__ = ["ClickEvent", "HostElement", "LinkHandlerCallback", "PointerEvent", "ValidationCallback"]
