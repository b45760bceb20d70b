"""Get termlink home directory path or path under it."""

import os
from pathlib import Path

from ...constants import TERMLINK_HOME_ENV, TERMLINK_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get termlink home directory path or path under it.

    Checks TERMLINK_HOME first, then HOME, then falls back to Path.home().

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the termlink home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.termlink")
        >>> get_home_dir("config.json")
        Path("/Users/user/.termlink/config.json")
    """
    home_env = os.environ.get(TERMLINK_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / TERMLINK_HOME_EXT if user_home else Path.home() / TERMLINK_HOME_EXT

    return home / Path(*parts) if parts else home
