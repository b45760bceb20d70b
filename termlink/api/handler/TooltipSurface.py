from typing import Protocol


class TooltipSurface(Protocol):
    """Hover message widget owned by the host terminal."""

    def show_message(self, x: int, y: int, text: str) -> None: ...

    def close_message(self) -> None: ...
