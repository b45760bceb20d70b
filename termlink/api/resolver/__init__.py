"""Link resolution: raw matched text to an existing file path."""

from .FileExistenceCheck import FileExistenceCheck
from .LinkResolver import LinkResolver
from .LocalFileExistenceCheck import LocalFileExistenceCheck
from .WorkspaceContext import WorkspaceContext

__all__ = ["FileExistenceCheck", "LinkResolver", "LocalFileExistenceCheck", "WorkspaceContext"]
