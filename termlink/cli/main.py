"""Main CLI entry point."""

from termlink.api.config.get_home_dir import get_home_dir
from termlink.api.config.TermLinkConfig import TermLinkConfig
from termlink.cli._create_app import _create_app
from termlink.utils.logger import configure_logging


def main() -> None:
    """Configure logging and run the termlinkc app."""
    try:
        level = TermLinkConfig.load().log.level
    except ValueError:
        # Commands report the config error themselves
        level = "INFO"
    configure_logging(get_home_dir(), level)
    _create_app()()
