from typing import Protocol


class WorkspaceContext(Protocol):
    """Active workspace used to anchor dot-relative paths."""

    def has_active_workspace(self) -> bool: ...

    def workspace_root_path(self) -> str:
        """Root path; only valid when ``has_active_workspace()`` is true."""
        ...
