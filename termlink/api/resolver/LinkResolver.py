"""Platform-aware resolution of matched local paths."""

from ...utils.logger import get_logger
from ..platform.PlatformContext import PlatformContext
from .FileExistenceCheck import FileExistenceCheck
from .LocalFileExistenceCheck import LocalFileExistenceCheck
from .WorkspaceContext import WorkspaceContext

logger = get_logger("resolver")


class LinkResolver:
    """Turns a raw matched path into a verified existing file path.

    Resolution order:
      1. ``~`` expands to HOMEDRIVE + HOMEPATH on Windows, HOME elsewhere.
      2. A leading ``.`` is joined onto the workspace root (every platform).
      3. The candidate must exist as a regular file.

    Every failure (missing environment values, no workspace, missing file,
    filesystem error) yields ``None``; nothing is raised.
    """

    def __init__(
        self,
        context: PlatformContext,
        exists_check: FileExistenceCheck | None = None,
        workspace: WorkspaceContext | None = None,
    ):
        self.context = context
        self.exists_check = exists_check or LocalFileExistenceCheck()
        self.workspace = workspace or context

    def candidate_path(self, link: str) -> str | None:
        """Expand ``link`` to the path that will be checked, or None if not resolvable."""
        path = self.context.path_module
        env = self.context.environment

        if link.startswith("~"):
            rest = link[1:]
            separators = "\\/" if self.context.is_windows else "/"
            # ~user forms are not expanded
            if rest and rest[0] not in separators:
                return None
            if self.context.is_windows:
                home_drive = env.get("HOMEDRIVE")
                home_path = env.get("HOMEPATH")
                if not home_drive or not home_path:
                    return None
                home = home_drive + home_path
            else:
                home = env.get("HOME")
                if not home:
                    return None
            link = path.normpath(path.join(home, rest.lstrip(separators)))

        if link.startswith("."):
            if not self.workspace.has_active_workspace():
                return None
            link = path.normpath(path.join(self.workspace.workspace_root_path(), link))

        return link

    async def resolve(self, link: str) -> str | None:
        """Return the existing file ``link`` refers to, or None if it is not a link."""
        candidate = self.candidate_path(link)
        if candidate is None:
            logger.debug("Not resolvable: %r", link)
            return None

        try:
            is_file = await self.exists_check.exists(candidate)
        except Exception as e:
            logger.debug("Existence check failed for %r: %s", candidate, e)
            return None

        if not is_file:
            logger.debug("Not found: %r -> %r", link, candidate)
            return None
        return candidate
