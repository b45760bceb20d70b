"""Top-level termlink configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILE_NAME
from .get_home_dir import get_home_dir
from .LinkConfig import LinkConfig
from .LogConfig import LogConfig


class TermLinkConfig(BaseModel):
    """Top-level configuration for termlink."""

    model_config = ConfigDict(extra="forbid")

    link: LinkConfig = Field(default_factory=LinkConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on TERMLINK_HOME or default to ~/.termlink."""
        return get_home_dir(CONFIG_FILE_NAME)

    @classmethod
    def load(cls, path: Path | None = None) -> "TermLinkConfig":
        """Load and validate config from file.

        A missing file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path or cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary for serialization."""
        return {
            "link": self.link.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self, path: Path | None = None) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = path or self.get_config_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
