"""Per-session platform facts."""

import ntpath
import posixpath
from dataclasses import dataclass, field
from types import ModuleType

from ..types.PointerEvent import PointerEvent
from .EnvironmentAccessor import EnvironmentAccessor
from .EnvironmentSnapshot import EnvironmentSnapshot
from .PlatformFamily import PlatformFamily


@dataclass(frozen=True)
class PlatformContext:
    """Immutable facts about a terminal session.

    Also satisfies the ``WorkspaceContext`` protocol for the optional workspace root.
    """

    family: PlatformFamily
    workspace_root: str | None = None
    environment: EnvironmentAccessor = field(default_factory=EnvironmentSnapshot)

    @classmethod
    def current(cls, workspace_root: str | None = None) -> "PlatformContext":
        """Build a context for the running interpreter and process environment."""
        return cls(
            family=PlatformFamily.detect(),
            workspace_root=workspace_root,
            environment=EnvironmentSnapshot.from_os(),
        )

    @property
    def is_windows(self) -> bool:
        return self.family is PlatformFamily.WINDOWS

    @property
    def is_mac(self) -> bool:
        return self.family is PlatformFamily.MAC

    @property
    def path_module(self) -> ModuleType:
        """Path flavour of the target platform, independent of the host OS."""
        return ntpath if self.is_windows else posixpath

    @property
    def modifier_name(self) -> str:
        return "Cmd" if self.is_mac else "Ctrl"

    @property
    def follow_link_message(self) -> str:
        return f"{self.modifier_name} + click to follow link"

    def has_active_workspace(self) -> bool:
        return bool(self.workspace_root)

    def workspace_root_path(self) -> str:
        if not self.workspace_root:
            raise ValueError("No active workspace")
        return self.workspace_root

    def modifier_pressed(self, event: PointerEvent) -> bool:
        """Whether ``event`` carries the platform's follow-link modifier (Cmd on Mac, Ctrl elsewhere)."""
        return bool(event.meta_key) if self.is_mac else bool(event.ctrl_key)
