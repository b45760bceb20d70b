from typing import Protocol


class PointerEvent(Protocol):
    """Pointer event delivered by the host when a link span is clicked."""

    ctrl_key: bool
    meta_key: bool

    def prevent_default(self) -> None: ...
