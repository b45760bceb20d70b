from typing import Protocol


class EditorHost(Protocol):
    """Opens files in an editor. Failures surface as exceptions from ``open_path``."""

    async def open_path(self, path: str) -> None: ...
