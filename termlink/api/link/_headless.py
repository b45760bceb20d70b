"""Host collaborators for running the link handler without a UI."""

from collections.abc import Callable


class _HeadlessElement:
    """Element with no position that ignores listeners."""

    offset_left = 0
    offset_top = 0

    def add_event_listener(self, event_name: str, listener: Callable[[], None]) -> None:
        pass


class _HeadlessTooltipSurface:
    def show_message(self, x: int, y: int, text: str) -> None:
        pass

    def close_message(self) -> None:
        pass


class _HeadlessEditorHost:
    """Records requested paths instead of opening them."""

    def __init__(self):
        self.opened: list[str] = []

    async def open_path(self, path: str) -> None:
        self.opened.append(path)
