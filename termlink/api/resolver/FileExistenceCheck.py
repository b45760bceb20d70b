from typing import Protocol


class FileExistenceCheck(Protocol):
    """Suspending check that ``path`` names an existing regular file."""

    async def exists(self, path: str) -> bool: ...
