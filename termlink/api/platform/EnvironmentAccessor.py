"""Read-only environment lookup."""

from typing import Protocol


class EnvironmentAccessor(Protocol):
    """Read-only access to environment values such as HOMEDRIVE and HOMEPATH."""

    def get(self, name: str) -> str | None: ...
