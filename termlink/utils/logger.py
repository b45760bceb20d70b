import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified termlink logging.

    Args:
        home: termlink home directory. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from ..api.config.get_home_dir import get_home_dir

        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / LOG_FILE_NAME

    root_logger = logging.getLogger("termlink")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Library code only asks for loggers; handlers are installed by the CLI entry point.
    """
    return logging.getLogger(f"termlink.{name}")
